from django.apps import AppConfig
from django.core import checks


def check_backend_configuration(app_configs, **kwargs):
    from .conf import config_warning

    warning = config_warning()
    if warning is None:
        return []
    return [checks.Warning(warning, hint='Falling back to local placeholders.', id='portfolio.W001')]


class PortfolioConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'portfolio'

    def ready(self):
        from .conf import log_config_status

        checks.register(check_backend_configuration, checks.Tags.compatibility)
        log_config_status()
