from .base import TableService


class MessageService(TableService):
    """Contact form messages. Only admins can read them, so nothing is cached."""

    table = 'messages'
    order_by = 'created_at'

    def submit(self, name, email, message):
        return self.create({'name': name, 'email': email, 'message': message, 'status': 'new'})

    def list(self, status=None, refresh=False):
        if status:
            return super().list('status', status, refresh=refresh)
        return super().list(refresh=refresh)

    def mark_read(self, pk):
        return self.update(pk, {'status': 'read'})
