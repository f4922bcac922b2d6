"""
Auth subsystem of the gateway.

Wraps Django's authentication so the rest of the app sees plain
identities. When bound to a request, sign-in/out go through
``django.contrib.auth.login``/``logout`` and persist in the Django
session; a standalone provider keeps the signed-in user in memory.
"""

import logging
from dataclasses import dataclass

from django.contrib.auth import authenticate, get_user_model, login, logout
from django.db import DatabaseError, IntegrityError

from .exceptions import AuthError
from .models import AdminProfile

logger = logging.getLogger(__name__)

SIGNED_IN = 'SIGNED_IN'
SIGNED_OUT = 'SIGNED_OUT'

_UNRESOLVED = object()


@dataclass(frozen=True)
class Identity:
    id: str
    email: str
    is_admin: bool = False
    is_demo: bool = False

    def as_dict(self):
        return {'id': self.id, 'email': self.email, 'is_admin': self.is_admin, 'is_demo': self.is_demo}


def identity_for(user):
    is_admin = user.is_staff or AdminProfile.objects.filter(user_id=user.pk).exists()
    return Identity(id=str(user.pk), email=user.email or user.get_username(), is_admin=is_admin)


class AuthProvider:
    def __init__(self, request=None):
        self._request = request
        self._user = None
        self._identity = _UNRESOLVED
        self._listeners = []

    def get_user(self):
        """Return the current Identity, or None when nobody is signed in."""
        if self._identity is _UNRESOLVED:
            user = self._request.user if self._request is not None else self._user
            if user is not None and user.is_authenticated:
                self._identity = identity_for(user)
            else:
                self._identity = None
        return self._identity

    def refresh(self):
        self._identity = _UNRESOLVED
        return self.get_user()

    def sign_in_with_password(self, email, password):
        user = authenticate(self._request, username=email, password=password)
        if user is None:
            raise AuthError('Invalid login credentials')
        self._set_user(user)
        identity = self.get_user()
        self._emit(SIGNED_IN, identity)
        return identity

    def sign_up(self, email, password):
        if not email or not password:
            raise AuthError('Signup requires a valid email and password')
        user_model = get_user_model()
        if user_model.objects.filter(username__iexact=email).exists():
            raise AuthError('User already registered')
        try:
            user = user_model.objects.create_user(username=email, email=email, password=password)
        except (IntegrityError, DatabaseError) as e:
            raise AuthError(str(e)) from e
        # create_user does not attach a backend, login() needs one
        user.backend = 'django.contrib.auth.backends.ModelBackend'
        self._set_user(user)
        identity = self.get_user()
        self._emit(SIGNED_IN, identity)
        return identity

    def sign_out(self):
        if self._request is not None:
            logout(self._request)
        self._user = None
        self._identity = None
        self._emit(SIGNED_OUT, None)

    def on_auth_state_change(self, callback):
        """
        Register ``callback(event, identity)``. Returns a function that
        removes the registration.
        """
        self._listeners.append(callback)

        def unsubscribe():
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def _set_user(self, user):
        if self._request is not None:
            login(self._request, user)
        self._user = user
        self._identity = _UNRESOLVED

    def _emit(self, event, identity):
        for callback in list(self._listeners):
            callback(event, identity)
