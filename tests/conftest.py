"""
Pytest configuration and fixtures for VA Hub tests.

Every test gets a fresh SQLite file seeded with the demo data.
"""
import pytest
from fastapi.testclient import TestClient

from vahub.core.config import Settings
from vahub.main import create_app

ADMIN_EMAIL = "admin@vahub.com"
ADMIN_PASSWORD = "Memyselfandi!1"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        database_url=f"sqlite:///{tmp_path / 'test.db'}",
        jwt_secret_key="test-secret",
        admin_email=ADMIN_EMAIL,
        admin_password=ADMIN_PASSWORD,
        seed_demo_data=True,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def database(client):
    return client.app.state.database


def login(client, email, password):
    response = client.post("/api/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return response.json()


@pytest.fixture
def admin_headers(client):
    token = login(client, ADMIN_EMAIL, ADMIN_PASSWORD)["access_token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def va_headers(client):
    token = login(client, "va@demo.com", "vademo")["access_token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def create_pending_job(client):
    """Post a job as the demo employer and return its id."""
    def _create(title="Bookkeeping Assistant", **fields):
        payload = {
            "employer_id": "employer-demo-1",
            "title": title,
            "description": "Reconcile accounts and prepare monthly reports.",
            "salary_min": 600,
            "salary_max": 900,
            "job_type": "Full-Time",
            "experience_level": "Intermediate",
        }
        payload.update(fields)
        response = client.post("/api/jobs", json=payload)
        assert response.status_code == 200, response.text
        return response.json()["id"]
    return _create
