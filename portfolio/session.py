"""
Per-request state containers: the authenticated session and the theme
preference. Both are built by SessionStoreMiddleware and hang off the
request; nothing here is module-global.
"""

import logging
from enum import Enum

from . import conf
from .auth import SIGNED_IN, Identity
from .exceptions import AuthError, ConfigurationError, GatewayError

logger = logging.getLogger(__name__)

DEMO_SESSION_KEY = 'portfolio_demo_identity'
THEME_SESSION_KEY = 'portfolio_theme_dark'


class SessionState(str, Enum):
    UNINITIALIZED = 'uninitialized'
    ANONYMOUS = 'anonymous'
    AUTHENTICATED = 'authenticated'


class SessionStore:
    """
    Holds the current identity, derived from the gateway's auth provider.

    ``storage`` is a dict-like used only to remember a demo identity
    between requests (the Django session in production).
    """

    def __init__(self, gateway, storage=None):
        self.gateway = gateway
        self.auth = gateway.auth
        self.storage = storage if storage is not None else {}
        self.state = SessionState.UNINITIALIZED
        self.user = None
        self._unsubscribe = None

    @property
    def is_authenticated(self):
        return self.state is SessionState.AUTHENTICATED

    @property
    def is_loading(self):
        return self.state is SessionState.UNINITIALIZED

    def _set(self, identity):
        self.user = identity
        self.state = SessionState.AUTHENTICATED if identity else SessionState.ANONYMOUS

    def _on_auth_change(self, event, identity):
        if event == SIGNED_IN and identity is not None:
            self._set(identity)
        else:
            self._set(None)

    def initialize(self):
        try:
            identity = self.auth.get_user()
        except (AuthError, GatewayError) as e:
            logger.error('Auth initialization error: %s', e)
            identity = None
        if identity is None and DEMO_SESSION_KEY in self.storage:
            identity = Identity(**self.storage[DEMO_SESSION_KEY])
        self._set(identity)
        if self._unsubscribe is None:
            self._unsubscribe = self.auth.on_auth_state_change(self._on_auth_change)
        return self.user

    def close(self):
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _demo_allowed(self):
        return bool(conf.get('ALLOW_DEMO_LOGIN'))

    def sign_in(self, email, password):
        if not conf.backend_configured() and not self._demo_allowed():
            message = conf.config_warning()
            logger.warning(message)
            raise ConfigurationError(message)

        if (
            self._demo_allowed()
            and email == conf.get('DEMO_ADMIN_EMAIL')
            and password == conf.get('DEMO_ADMIN_PASSWORD')
        ):
            logger.warning('Demo login used for %s, the backend was not contacted', email)
            identity = Identity(id='demo-user', email=email, is_demo=True)
            self.storage[DEMO_SESSION_KEY] = {'id': identity.id, 'email': identity.email, 'is_demo': True}
            self._set(identity)
            return identity

        try:
            identity = self.auth.sign_in_with_password(email, password)
        except AuthError as e:
            logger.error('Sign in error: %s', e)
            self._set(None)
            raise
        self._set(identity)
        return identity

    def sign_up(self, email, password):
        try:
            identity = self.auth.sign_up(email, password)
        except AuthError as e:
            logger.error('Sign up error: %s', e)
            raise
        self._set(identity)

        try:
            self.gateway.insert('admins', {'user_id': int(identity.id), 'email': email})
        except GatewayError as e:
            # non-fatal: only an existing admin may write admins rows, so a
            # fresh sign-up stays a plain account until an admin grants it
            logger.warning('Could not create admin row in `admins` table: %s', e)
        else:
            # the admins row grants admin rights, resolve the identity again
            self._set(self.auth.refresh())
        return self.user

    def sign_out(self):
        self.storage.pop(DEMO_SESSION_KEY, None)
        self.auth.sign_out()
        self._set(None)


class ThemeStore:
    def __init__(self, storage=None, default_dark=True):
        self.storage = storage if storage is not None else {}
        self.default_dark = default_dark

    @property
    def is_dark(self):
        return self.storage.get(THEME_SESSION_KEY, self.default_dark)

    def toggle(self):
        self.storage[THEME_SESSION_KEY] = not self.is_dark
        return self.is_dark
