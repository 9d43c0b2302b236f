"""
External identity provider (Supabase Auth).

Kept apart from the server's own users table: an identity-provider session
never creates or updates a local user row.
"""
import logging
from typing import Any, Callable, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)

AuthListener = Callable[[str, Optional[Dict[str, Any]]], None]


class IdentityError(Exception):
    """Error reported by the identity provider."""
    pass


def user_from_identity(identity_user: Dict[str, Any]) -> Dict[str, Any]:
    """
    Build a local user dict from an identity-provider user.

    Name comes from the full_name metadata, falling back to the email prefix;
    role from the role metadata, falling back to va. Status is always approved.
    """
    metadata = identity_user.get("user_metadata") or {}
    email = identity_user.get("email") or ""
    return {
        "id": identity_user["id"],
        "name": metadata.get("full_name") or email.split("@")[0] or "User",
        "email": email,
        "role": metadata.get("role") or "va",
        "status": "approved",
    }


class IdentityProvider:
    """
    Interface of the identity collaborator.

    Subclasses implement sign_up, sign_in_with_password and sign_out; this
    base class holds the current session and the auth-state listeners.
    """

    def __init__(self):
        self._session: Optional[Dict[str, Any]] = None
        self._listeners: List[AuthListener] = []

    def sign_up(self, email: str, password: str, metadata: Optional[dict] = None) -> Dict[str, Any]:
        raise NotImplementedError

    def sign_in_with_password(self, email: str, password: str) -> Dict[str, Any]:
        raise NotImplementedError

    def sign_out(self):
        raise NotImplementedError

    def get_session(self) -> Optional[Dict[str, Any]]:
        return self._session

    def on_auth_state_change(self, listener: AuthListener) -> Callable[[], None]:
        """Register a listener; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_session(self, event: str, session: Optional[Dict[str, Any]]):
        self._session = session
        for listener in list(self._listeners):
            listener(event, session)


class SupabaseIdentityProvider(IdentityProvider):
    """Supabase Auth over its REST API."""

    def __init__(self, url: str, key: str, session=None, timeout: float = 10):
        super().__init__()
        self.url = url.rstrip("/")
        self.key = key
        self.http = session or requests.Session()
        self.timeout = timeout

    def _headers(self, access_token: Optional[str] = None) -> dict:
        return {
            "apikey": self.key,
            "Authorization": f"Bearer {access_token or self.key}",
        }

    def _post(self, path: str, json: Optional[dict] = None, params: Optional[dict] = None,
              access_token: Optional[str] = None) -> Dict[str, Any]:
        response = self.http.post(
            f"{self.url}/auth/v1{path}", json=json, params=params,
            headers=self._headers(access_token), timeout=self.timeout
        )
        if response.status_code >= 400:
            try:
                body = response.json()
                message = body.get("msg") or body.get("error_description") or body.get("message") or response.text
            except ValueError:
                message = response.text
            raise IdentityError(message)
        return response.json() if response.content else {}

    def sign_up(self, email: str, password: str, metadata: Optional[dict] = None) -> Dict[str, Any]:
        """Create an identity. Returns the provider's user (or session) payload."""
        logger.info("Identity sign-up for %s", email)
        return self._post("/signup", json={"email": email, "password": password, "data": metadata or {}})

    def sign_in_with_password(self, email: str, password: str) -> Dict[str, Any]:
        logger.info("Identity sign-in for %s", email)
        session = self._post("/token", params={"grant_type": "password"},
                             json={"email": email, "password": password})
        if session.get("access_token"):
            self._set_session("SIGNED_IN", session)
        return session

    def sign_out(self):
        if self._session:
            self._post("/logout", access_token=self._session.get("access_token"))
        self._set_session("SIGNED_OUT", None)

    def health(self) -> bool:
        """True if the auth service answers its health endpoint."""
        try:
            response = self.http.get(f"{self.url}/auth/v1/health", headers=self._headers(),
                                     timeout=self.timeout)
            return response.status_code < 400
        except requests.RequestException as e:
            logger.error("Identity provider unreachable: %s", e)
            return False
