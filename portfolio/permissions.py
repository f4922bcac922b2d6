from rest_framework import permissions


def _signed_in(request):
    store = getattr(request, 'session_store', None)
    return store is not None and store.is_authenticated


class IsAdminOrReadOnly(permissions.BasePermission):
    """
    Reads are open, writes need a signed-in session. Whether the signed-in
    identity may actually write is decided by the gateway's policies.
    """

    def has_permission(self, request, view):
        if request.method in permissions.SAFE_METHODS:
            return True # Allow GET, HEAD, OPTIONS requests
        return _signed_in(request)


class IsSignedIn(permissions.BasePermission):
    def has_permission(self, request, view):
        return _signed_in(request)
