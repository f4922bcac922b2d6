from .base import TableService
from .uploads import store


class ProjectService(TableService):
    table = 'projects'
    order_by = 'created_at'
    stamp_updated_at = True
    cached = True

    def list_by_category(self, category, refresh=False):
        return self.list('category', category, refresh=refresh)

    def upload_image(self, upload):
        """Store a project image and return its public URL."""
        _, url = store(self.gateway, 'project', upload)
        return url
