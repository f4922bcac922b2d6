"""
Read-only statistics over the event tables.

Every query covers a trailing window ending now. Counting happens in the
database; unique visitors and device breakdowns are reduced in memory
from the rows of the window, which is fine at portfolio traffic levels.
"""

import logging
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from datetime import timedelta

from django.db import connections
from django.utils import timezone

from .. import conf

logger = logging.getLogger(__name__)

DEVICE_TYPES = ('desktop', 'mobile', 'tablet')


def window_start(days):
    # clamped so the start stays a representable datetime
    days = min(days, conf.get('ANALYTICS_MAX_DAYS'))
    return timezone.now() - timedelta(days=days)


def device_breakdown(counts):
    """
    Percentages for desktop, mobile and tablet. Rounded with the largest
    remainder method so they add up to exactly 100 (or are all 0).
    """
    values = {device: counts.get(device, 0) for device in DEVICE_TYPES}
    total = sum(values.values())
    if total == 0:
        return {device: 0 for device in DEVICE_TYPES}

    exact = {device: value * 100 / total for device, value in values.items()}
    result = {device: int(share) for device, share in exact.items()}
    leftover = 100 - sum(result.values())
    by_remainder = sorted(DEVICE_TYPES, key=lambda d: exact[d] - result[d], reverse=True)
    for device in by_remainder[:leftover]:
        result[device] += 1
    return result


def _in_worker(func, *args):
    try:
        return func(*args)
    finally:
        # worker threads get their own connections, don't leak them
        connections.close_all()


class AnalyticsService:
    def __init__(self, gateway):
        self.gateway = gateway

    def _since(self, days):
        return {'created_at': window_start(days)}

    def get_page_view_stats(self, days=30):
        return self.gateway.select('page_views', gte=self._since(days), order_by='created_at')

    def get_total_page_views(self, days=30):
        return self.gateway.count('page_views', gte=self._since(days))

    def get_total_project_views(self, days=30):
        return self.gateway.count('project_views', gte=self._since(days))

    def get_unique_visitors(self, days=30):
        rows = self.gateway.select('page_views', columns=['visitor_id'], gte=self._since(days))
        return len({row['visitor_id'] for row in rows})

    def get_device_analytics(self, days=30):
        rows = self.gateway.select('page_views', columns=['device_type'], gte=self._since(days))
        return dict(Counter(row['device_type'] for row in rows))

    def get_project_view_stats(self, days=30):
        rows = self.gateway.select(
            'project_views',
            columns=['project_id', 'project__title'],
            gte=self._since(days),
            order_by='created_at',
        )
        counts = Counter((row['project_id'], row['project__title']) for row in rows)
        return [
            {'project_id': project_id, 'title': title, 'views': views}
            for (project_id, title), views in counts.most_common()
        ]

    def get_unread_messages_count(self):
        return self.gateway.count('messages', filters={'status': 'new'})

    def get_contact_messages(self, status=None):
        filters = {'status': status} if status else None
        return self.gateway.select('messages', filters=filters, order_by='created_at')

    def get_recent_activity(self, limit=10):
        return self.gateway.select(
            'page_views',
            columns=['page_path', 'page_title', 'device_type', 'created_at'],
            order_by='created_at',
            limit=limit,
        )

    def dashboard(self, days=30, recent=10, isolate=False):
        """
        Run the dashboard queries concurrently.

        By default one failing query fails the whole call and the other
        results are dropped. With ``isolate=True`` failures are collected
        per query under ``errors`` and the rest is still returned.
        """
        queries = {
            'total_views': (self.get_total_page_views, days),
            'unique_visitors': (self.get_unique_visitors, days),
            'project_views': (self.get_total_project_views, days),
            'unread_messages': (self.get_unread_messages_count,),
            'devices': (self.get_device_analytics, days),
            'recent_activity': (self.get_recent_activity, recent),
            'messages': (self.get_contact_messages,),
        }
        defaults = {'devices': {}, 'recent_activity': [], 'messages': []}

        results = {}
        errors = {}
        with ThreadPoolExecutor(max_workers=conf.get('ANALYTICS_WORKERS')) as pool:
            futures = {name: pool.submit(_in_worker, *query) for name, query in queries.items()}
            for name, future in futures.items():
                try:
                    results[name] = future.result()
                except Exception as e:
                    if not isolate:
                        logger.error('Dashboard query %s failed: %s', name, e)
                        raise
                    logger.warning('Dashboard query %s failed: %s', name, e)
                    errors[name] = str(e)
                    results[name] = defaults.get(name, 0)

        results['device_breakdown'] = device_breakdown(results['devices'])
        results['days'] = days
        if isolate:
            results['errors'] = errors
        return results
