import logging
import os

from django.conf import settings

logger = logging.getLogger(__name__)

DEFAULTS = {
    'ALLOW_DEMO_LOGIN': False,
    'DEMO_ADMIN_EMAIL': 'admin@example.com',
    'DEMO_ADMIN_PASSWORD': 'password123',
    'LIST_CACHE_TIMEOUT': 300,
    'PROJECT_LIST_TIMEOUT': 10,
    'PROJECT_LIST_WORKERS': 8,
    'ANALYTICS_DEFAULT_DAYS': 30,
    'ANALYTICS_MAX_DAYS': 3650,
    'ANALYTICS_WORKERS': 7,
    'STORAGE_BUCKET': 'documents',
    'DOCUMENT_EXTENSIONS': ['pdf', 'doc', 'docx', 'png', 'jpg', 'jpeg'],
    'IMAGE_EXTENSIONS': ['png', 'jpg', 'jpeg', 'webp'],
}


def get(name):
    """Read one key of the PORTFOLIO settings dict, falling back to DEFAULTS."""
    return getattr(settings, 'PORTFOLIO', {}).get(name, DEFAULTS[name])


def backend_configured():
    database_url = os.environ.get('DATABASE_URL', '')
    secret_key = os.environ.get('SECRET_KEY', '')
    return '://' in database_url and len(secret_key) > 20


def config_warning():
    if backend_configured():
        return None
    return (
        'The backend appears to be unconfigured. Please set DATABASE_URL and '
        'SECRET_KEY in your environment (e.g. Render Environment Variables).'
    )


def log_config_status():
    warning = config_warning()
    logger.info(
        'Backend configuration status: configured=%s has_database_url=%s has_secret_key=%s',
        warning is None,
        bool(os.environ.get('DATABASE_URL')),
        bool(os.environ.get('SECRET_KEY')),
    )
    if warning:
        logger.warning(warning)
    return warning
