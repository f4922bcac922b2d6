PERMISSION_MARKER = 'row-level security'


class PortfolioError(Exception):
    """Base class for errors raised by the portfolio app."""


class ConfigurationError(PortfolioError):
    pass


class AuthError(PortfolioError):
    pass


class GatewayError(PortfolioError):
    """
    A failure reported by the backend. The message is the backend's own
    message, passed through unchanged.
    """

    def __init__(self, message, code=None):
        super().__init__(message)
        self.message = message
        self.code = code


class RecordNotFound(GatewayError):
    def __init__(self, table, pk):
        super().__init__(f"No row in '{table}' with id {pk}", code='PGRST116')
        self.table = table
        self.pk = pk


def is_permission_error(error):
    return PERMISSION_MARKER in str(error)
