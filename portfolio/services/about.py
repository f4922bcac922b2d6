import logging

from ..exceptions import RecordNotFound
from ..models import About
from .base import TableService

logger = logging.getLogger(__name__)


class AboutService(TableService):
    """The About page is a single row with a fixed id."""

    table = 'about'
    order_by = 'updated_at'
    stamp_updated_at = True
    cached = True

    def get(self):
        rows = self.list()
        return rows[0] if rows else None

    def update(self, fields):
        return super().update(About.SINGLETON_ID, fields)

    def save(self, fields):
        try:
            return self.update(fields)
        except RecordNotFound:
            logger.info('About row missing, inserting it')
            return self.create({**fields, 'id': About.SINGLETON_ID})
