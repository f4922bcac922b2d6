"""
Visitor tracking - user agent classification and pseudo identifiers.

Events are written with the caller's gateway. Tracking must never break
a page, so failures are logged and swallowed here.
"""

import logging
import random
import re
import string
import time

from .exceptions import GatewayError

logger = logging.getLogger(__name__)

VISITOR_COOKIE = 'analytics_visitor_id'
SESSION_KEY = 'analytics_session_id'

_TABLET = re.compile(r'(tablet|ipad|playbook|silk)|(android(?!.*mobi))', re.IGNORECASE)
_MOBILE = re.compile(
    r'Mobile|Android|iP(hone|od)|IEMobile|BlackBerry|Kindle|Silk-Accelerated|(hpw|web)OS|Opera M(obi|ini)'
)

_ALPHABET = string.digits + string.ascii_lowercase


def pseudo_id(prefix):
    """``{prefix}_{epoch millis}_{9 base36 chars}``"""
    suffix = ''.join(random.choices(_ALPHABET, k=9))
    return f'{prefix}_{int(time.time() * 1000)}_{suffix}'


def device_type(user_agent):
    if _TABLET.search(user_agent):
        return 'tablet'
    if _MOBILE.search(user_agent):
        return 'mobile'
    return 'desktop'


def browser(user_agent):
    # Edge and Opera also advertise Chrome, check them first
    if 'Edg' in user_agent:
        return 'Edge'
    if 'OPR' in user_agent or 'Opera' in user_agent:
        return 'Opera'
    if 'Firefox' in user_agent:
        return 'Firefox'
    if 'Chrome' in user_agent:
        return 'Chrome'
    if 'Safari' in user_agent:
        return 'Safari'
    return 'Other'


def operating_system(user_agent):
    if 'Android' in user_agent:
        return 'Android'
    if 'iPhone' in user_agent or 'iPad' in user_agent:
        return 'iOS'
    if 'Win' in user_agent:
        return 'Windows'
    if 'Mac' in user_agent:
        return 'macOS'
    if 'Linux' in user_agent:
        return 'Linux'
    return 'Other'


def visitor_ids(request, visitor_id=None, session_id=None):
    """
    Resolve the pseudo identifiers for a request. Client supplied ids win;
    otherwise the session id lives in the Django session and the visitor
    id in a long-lived cookie (set by the view).
    """
    session_id = session_id or request.session.get(SESSION_KEY)
    if not session_id:
        session_id = pseudo_id('session')
        request.session[SESSION_KEY] = session_id
    visitor_id = visitor_id or request.COOKIES.get(VISITOR_COOKIE) or pseudo_id('visitor')
    return visitor_id, session_id


def track_page_view(gateway, page_path, page_title='', referrer='', user_agent='', visitor_id='', session_id=''):
    try:
        gateway.insert('page_views', {
            'page_path': page_path,
            'page_title': page_title or '',
            'referrer': referrer or 'direct',
            'user_agent': user_agent[:500],
            'device_type': device_type(user_agent),
            'browser': browser(user_agent),
            'os': operating_system(user_agent),
            'session_id': session_id,
            'visitor_id': visitor_id,
        })
    except GatewayError as e:
        logger.warning('Could not record page view for %s: %s', page_path, e)
        return False
    return True


def track_project_view(gateway, project_id, visitor_id='', session_id=''):
    try:
        gateway.insert('project_views', {
            'project_id': project_id,
            'session_id': session_id,
            'visitor_id': visitor_id,
        })
    except GatewayError as e:
        logger.warning('Could not record view of project %s: %s', project_id, e)
        return False
    return True
