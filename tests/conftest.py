from __future__ import annotations

import os
import tempfile
from pathlib import Path

# Settings are read at import time: point them at a throwaway database first.
_DB_PATH = Path(tempfile.mkdtemp(prefix="vendor_api_tests_")) / "vendor_api_test.db"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_PATH}"
os.environ["SEED_DEMO_DATA"] = "false"
os.environ["AUTO_CREATE_SCHEMA"] = "true"
os.environ["APP_ENV"] = "test"
os.environ["JWT_SECRET_KEY"] = "test-secret-key-for-the-vendor-api-suite"

import fakeredis  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from vendor_api.core.config import settings  # noqa: E402
from vendor_api.main import create_app  # noqa: E402

ACME = {
    "name": "Acme",
    "address1": "X",
    "country": "US",
    "mail": "a@b.com",
    "phone": "+15551234567",
}

VALID_IBAN = "DE89 3704 0044 0532 0130 00"
COMPACT_IBAN = "DE89370400440532013000"
VALID_BIC = "COBADEFFXXX"
VALID_PHONE = "+44 20 8366 1177"


@pytest.fixture()
def redis_client() -> fakeredis.FakeAsyncRedis:
    return fakeredis.FakeAsyncRedis(server=fakeredis.FakeServer(), decode_responses=True)


@pytest.fixture()
def client(redis_client: fakeredis.FakeAsyncRedis):
    _DB_PATH.unlink(missing_ok=True)
    with TestClient(create_app(redis_client=redis_client)) as test_client:
        yield test_client


def _login(client: TestClient, email: str, password: str) -> dict[str, str]:
    response = client.post("/api/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['accessToken']}"}


@pytest.fixture()
def admin_headers(client: TestClient) -> dict[str, str]:
    return _login(client, settings.admin_email, settings.admin_password)


@pytest.fixture()
def manager_headers(client: TestClient) -> dict[str, str]:
    return _login(client, settings.manager_email, settings.manager_password)


@pytest.fixture()
def login():
    return _login


@pytest.fixture()
def vendor_id(client: TestClient, admin_headers: dict[str, str]) -> int:
    response = client.post("/api/vendor", json=ACME, headers=admin_headers)
    assert response.status_code == 201, response.text
    return response.json()["id"]
