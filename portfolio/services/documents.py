import logging

from ..exceptions import GatewayError
from ..gateway import default_bucket
from .base import TableService
from .uploads import store

logger = logging.getLogger(__name__)


class DocumentService(TableService):
    table = 'documents'
    order_by = 'created_at'
    cached = True

    def list_by_type(self, doc_type, refresh=False):
        return self.list('type', doc_type, refresh=refresh)

    def get_cv(self):
        rows = self.gateway.select(self.table, filters={'type': 'cv'}, order_by=self.order_by, limit=1)
        return rows[0] if rows else None

    def upload_file(self, upload, doc_type):
        """
        Store an uploaded file under ``{type}s/{type}-{timestamp}.{ext}``.

        Returns the public URL together with the original file name and
        its exact size in bytes.
        """
        _, url = store(self.gateway, doc_type, upload)
        return {'public_url': url, 'file_name': upload.name, 'file_size': upload.size}

    def upload_document(self, upload, doc_type, title):
        """
        Upload a file and record it. When the record cannot be written the
        stored file is removed again so no unreferenced blob is left behind.
        """
        path, url = store(self.gateway, doc_type, upload)
        try:
            return self.create({
                'type': doc_type,
                'title': title,
                'file_url': url,
                'file_name': upload.name,
                'file_size': upload.size,
            })
        except GatewayError:
            logger.warning('Document insert failed, removing stored file %s', path)
            try:
                self.gateway.remove(default_bucket(), [path])
            except GatewayError as cleanup_error:
                logger.error('Could not remove orphaned file %s: %s', path, cleanup_error)
            raise
