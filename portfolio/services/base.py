"""
Shared CRUD service - one subclass per table.
"""

import logging

from django.core.cache import cache
from django.utils import timezone

from .. import conf
from ..exceptions import RecordNotFound

logger = logging.getLogger(__name__)


class TableService:
    """
    CRUD operations for one table, built on a Gateway.

    Subclasses set ``table`` and ``order_by``. Tables readable by the
    public set ``cached = True``; their list results are kept in Django's
    cache for LIST_CACHE_TIMEOUT seconds.
    """

    table = None
    order_by = 'created_at'
    stamp_updated_at = False
    cached = False

    def __init__(self, gateway):
        self.gateway = gateway

    # -- list cache --

    def _generation_key(self):
        return f'portfolio:{self.table}:generation'

    def _list_key(self, filter_field, value):
        generation = cache.get_or_set(self._generation_key(), 1, timeout=None)
        return f'portfolio:{self.table}:list:{generation}:{filter_field}={value}'

    def invalidate(self):
        """Make the next list() go to the backend."""
        try:
            cache.incr(self._generation_key())
        except ValueError:
            cache.set(self._generation_key(), 1, timeout=None)

    # -- operations --

    def list(self, filter_field=None, value=None, refresh=False):
        if not self.cached:
            return self._fetch(filter_field, value)

        key = self._list_key(filter_field, value)
        if not refresh:
            rows = cache.get(key)
            if rows is not None:
                return rows
        rows = self._fetch(filter_field, value)
        cache.set(key, rows, timeout=conf.get('LIST_CACHE_TIMEOUT'))
        return rows

    def _fetch(self, filter_field=None, value=None):
        filters = {filter_field: value} if filter_field else None
        return self.gateway.select(self.table, filters=filters, order_by=self.order_by)

    def get(self, pk):
        rows = self.gateway.select(self.table, filters={'id': pk}, limit=1)
        return rows[0] if rows else None

    def create(self, fields):
        row = self.gateway.insert(self.table, dict(fields))
        self.invalidate()
        return row

    def update(self, pk, fields):
        fields = dict(fields)
        if self.stamp_updated_at:
            fields['updated_at'] = timezone.now()
        rows = self.gateway.update(self.table, pk, fields)
        if not rows:
            raise RecordNotFound(self.table, pk)
        self.invalidate()
        return rows[0]

    def delete(self, pk):
        deleted = self.gateway.delete(self.table, pk)
        if not deleted:
            logger.debug('Delete of %s id=%s matched no rows', self.table, pk)
        self.invalidate()
