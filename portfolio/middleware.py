from .auth import AuthProvider
from .gateway import Gateway
from .session import SessionStore, ThemeStore


class SessionStoreMiddleware:
    """
    Attach ``request.gateway``, ``request.session_store`` and
    ``request.theme`` for the lifetime of the request.

    Must come after SessionMiddleware and AuthenticationMiddleware.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.gateway = Gateway(auth=AuthProvider(request))
        request.session_store = SessionStore(request.gateway, storage=request.session)
        request.session_store.initialize()
        request.theme = ThemeStore(request.session)
        try:
            return self.get_response(request)
        finally:
            request.session_store.close()
