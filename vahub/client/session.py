"""
Client session - who is logged in.

Two separate ways to log in: against the VA Hub API (local users table,
returns a server token) or against the identity provider. They are never
merged; a user logged in through the identity provider has no server token.
"""
import logging
from typing import Any, Callable, Dict, List, Optional

from vahub.client.api import VAHubClient
from vahub.client.identity import IdentityProvider, IdentityError, user_from_identity

logger = logging.getLogger(__name__)

UserListener = Callable[[Optional[Dict[str, Any]]], None]


class ClientSession:

    def __init__(self, api: VAHubClient, identity: Optional[IdentityProvider] = None):
        self.api = api
        self.identity = identity
        self.user: Optional[Dict[str, Any]] = None
        self._listeners: List[UserListener] = []
        self._unsubscribe = identity.on_auth_state_change(self._on_identity_change) if identity else None

    @property
    def token(self) -> Optional[str]:
        return self.api.token

    def on_change(self, listener: UserListener):
        self._listeners.append(listener)

    def _set_user(self, user: Optional[Dict[str, Any]]):
        self.user = user
        for listener in list(self._listeners):
            listener(user)

    def _on_identity_change(self, event: str, session: Optional[Dict[str, Any]]):
        if session and session.get("user"):
            self._set_user(user_from_identity(session["user"]))
        elif self.api.token is None:
            # A server login is not touched by identity sign-out
            self._set_user(None)

    def login(self, email: str, password: str) -> Dict[str, Any]:
        """Log in against the server's users table."""
        data = self.api.login(email, password)
        self._set_user(data["user"])
        return data["user"]

    def register(self, name: str, email: str, password: str, role: str) -> Dict[str, Any]:
        data = self.api.register(name, email, password, role)
        self._set_user(data["user"])
        return data["user"]

    def login_with_identity(self, email: str, password: str) -> Dict[str, Any]:
        """Log in through the identity provider only."""
        if self.identity is None:
            raise IdentityError("No identity provider configured")
        session = self.identity.sign_in_with_password(email, password)
        if not session.get("access_token"):
            raise IdentityError("Please confirm your email before logging in.")
        user = user_from_identity(session["user"])
        self._set_user(user)
        return user

    def register_with_identity(self, name: str, email: str, password: str, role: str) -> Dict[str, Any]:
        """Create an identity with full_name/role metadata. The user still has to log in."""
        if self.identity is None:
            raise IdentityError("No identity provider configured")
        return self.identity.sign_up(email, password, {"full_name": name, "role": role})

    def restore(self) -> Optional[Dict[str, Any]]:
        """Pick up an existing identity-provider session, if any."""
        if self.identity is None:
            return None
        session = self.identity.get_session()
        if session and session.get("user"):
            self._set_user(user_from_identity(session["user"]))
        return self.user

    def logout(self):
        self.api.logout()
        if self.identity is not None and self.identity.get_session():
            self.identity.sign_out()
        self._set_user(None)

    def close(self):
        if self._unsubscribe:
            self._unsubscribe()
            self._unsubscribe = None
