"""
Tests for the identity provider client and identity-based sessions.

The HTTP layer is replaced by a fake requests session.
"""
import pytest

from vahub.client import (
    ClientSession, IdentityError, SupabaseIdentityProvider, VAHubClient, user_from_identity
)


class FakeResponse:
    def __init__(self, status_code, payload=None):
        self.status_code = status_code
        self._payload = payload
        self.content = b"{}" if payload is not None else b""
        self.text = str(payload)

    def json(self):
        if self._payload is None:
            raise ValueError("no body")
        return self._payload


class FakeHttp:
    """Records calls and answers from a queue of responses."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append(("POST", url, kwargs))
        return self.responses.pop(0)

    def get(self, url, **kwargs):
        self.calls.append(("GET", url, kwargs))
        return self.responses.pop(0)


IDENTITY_USER = {
    "id": "uid-1",
    "email": "maria@example.com",
    "user_metadata": {"full_name": "Maria Santos", "role": "employer"},
}
SESSION = {"access_token": "at-1", "token_type": "bearer", "user": IDENTITY_USER}


class TestUserFromIdentity:

    def test_uses_metadata(self):
        assert user_from_identity(IDENTITY_USER) == {
            "id": "uid-1", "name": "Maria Santos", "email": "maria@example.com",
            "role": "employer", "status": "approved",
        }

    def test_falls_back_to_email_prefix_and_va(self):
        user = user_from_identity({"id": "uid-2", "email": "joe.b@example.com"})
        assert user["name"] == "joe.b"
        assert user["role"] == "va"
        assert user["status"] == "approved"

    def test_no_email(self):
        assert user_from_identity({"id": "uid-3", "user_metadata": {}})["name"] == "User"


class TestSupabaseIdentityProvider:

    def test_sign_up_sends_metadata(self):
        http = FakeHttp(FakeResponse(200, IDENTITY_USER))
        provider = SupabaseIdentityProvider("https://auth.example/", "anon-key", session=http)
        provider.sign_up("maria@example.com", "pw", {"full_name": "Maria Santos", "role": "employer"})

        method, url, kwargs = http.calls[0]
        assert url == "https://auth.example/auth/v1/signup"
        assert kwargs["json"]["data"] == {"full_name": "Maria Santos", "role": "employer"}
        assert kwargs["headers"]["apikey"] == "anon-key"

    def test_sign_in_stores_session_and_notifies(self):
        http = FakeHttp(FakeResponse(200, SESSION))
        provider = SupabaseIdentityProvider("https://auth.example", "anon-key", session=http)
        events = []
        provider.on_auth_state_change(lambda event, session: events.append(event))

        provider.sign_in_with_password("maria@example.com", "pw")
        assert provider.get_session() == SESSION
        assert events == ["SIGNED_IN"]
        assert http.calls[0][2]["params"] == {"grant_type": "password"}

    def test_error_message_from_body(self):
        http = FakeHttp(FakeResponse(400, {"error_description": "Invalid login credentials"}))
        provider = SupabaseIdentityProvider("https://auth.example", "anon-key", session=http)
        with pytest.raises(IdentityError, match="Invalid login credentials"):
            provider.sign_in_with_password("maria@example.com", "bad")
        assert provider.get_session() is None

    def test_sign_out_uses_access_token_and_unsubscribe(self):
        http = FakeHttp(FakeResponse(200, SESSION), FakeResponse(204))
        provider = SupabaseIdentityProvider("https://auth.example", "anon-key", session=http)
        events = []
        unsubscribe = provider.on_auth_state_change(lambda event, session: events.append(event))
        provider.sign_in_with_password("maria@example.com", "pw")
        unsubscribe()
        provider.sign_out()

        assert http.calls[1][2]["headers"]["Authorization"] == "Bearer at-1"
        assert provider.get_session() is None
        assert events == ["SIGNED_IN"]

    def test_health(self):
        provider = SupabaseIdentityProvider("https://auth.example", "k", session=FakeHttp(FakeResponse(200, {})))
        assert provider.health() is True


class TestIdentitySession:

    @pytest.fixture
    def api(self, client):
        return VAHubClient("http://testserver", session=client)

    def test_login_with_identity_has_no_server_token(self, api):
        provider = SupabaseIdentityProvider("https://auth.example", "k", session=FakeHttp(FakeResponse(200, SESSION)))
        session = ClientSession(api, provider)
        user = session.login_with_identity("maria@example.com", "pw")

        assert user["name"] == "Maria Santos"
        assert session.user == user
        assert session.token is None

    def test_unconfirmed_email(self, api):
        unconfirmed = {"user": IDENTITY_USER}
        provider = SupabaseIdentityProvider("https://auth.example", "k", session=FakeHttp(FakeResponse(200, unconfirmed)))
        session = ClientSession(api, provider)
        with pytest.raises(IdentityError, match="confirm your email"):
            session.login_with_identity("maria@example.com", "pw")
        assert session.user is None

    def test_restore_and_sign_out_event(self, api):
        http = FakeHttp(FakeResponse(200, SESSION), FakeResponse(204))
        provider = SupabaseIdentityProvider("https://auth.example", "k", session=http)
        provider.sign_in_with_password("maria@example.com", "pw")

        session = ClientSession(api, provider)
        assert session.restore()["id"] == "uid-1"

        provider.sign_out()
        assert session.user is None
        session.close()

    def test_register_with_identity_sends_role(self, api):
        http = FakeHttp(FakeResponse(200, IDENTITY_USER))
        session = ClientSession(api, SupabaseIdentityProvider("https://auth.example", "k", session=http))
        session.register_with_identity("Maria Santos", "maria@example.com", "pw", "employer")
        assert http.calls[0][2]["json"]["data"] == {"full_name": "Maria Santos", "role": "employer"}
        assert session.user is None

    def test_identity_sign_out_keeps_server_login(self, api):
        http = FakeHttp(FakeResponse(200, SESSION), FakeResponse(204))
        provider = SupabaseIdentityProvider("https://auth.example", "k", session=http)
        provider.sign_in_with_password("maria@example.com", "pw")
        session = ClientSession(api, provider)
        session.login("va@demo.com", "vademo")

        provider.sign_out()
        assert session.user["id"] == "va-demo-1"
