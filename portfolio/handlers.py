import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from .exceptions import (
    AuthError,
    ConfigurationError,
    GatewayError,
    RecordNotFound,
    is_permission_error,
)

logger = logging.getLogger(__name__)

PERMISSION_DENIED = 'Permission denied: You do not have admin rights.'
RETRY = 'Something went wrong talking to the backend. Please try again.'


def api_exception_handler(exc, context):
    """DRF exception handler that knows about the portfolio error types."""
    response = exception_handler(exc, context)
    if response is not None:
        return response

    if is_permission_error(exc):
        logger.warning('Permission denied: %s', exc)
        return Response({"error": PERMISSION_DENIED}, status=status.HTTP_403_FORBIDDEN)
    if isinstance(exc, RecordNotFound):
        return Response({"error": str(exc)}, status=status.HTTP_404_NOT_FOUND)
    if isinstance(exc, AuthError):
        return Response({"error": str(exc)}, status=status.HTTP_401_UNAUTHORIZED)
    if isinstance(exc, ConfigurationError):
        return Response({"error": str(exc)}, status=status.HTTP_503_SERVICE_UNAVAILABLE)
    if isinstance(exc, GatewayError):
        logger.error('Backend error: %s', exc)
        return Response({"error": exc.message, "detail": RETRY}, status=status.HTTP_503_SERVICE_UNAVAILABLE)
    return None
