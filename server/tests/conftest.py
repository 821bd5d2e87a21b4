import copy

import pytest
from fastapi.testclient import TestClient

from core.config import AppSettings
from core.seed import DEMO_USER_EMAIL, DEMO_USER_PASSWORD, seed_storage
from core.storage import MemStorage
from main import create_app

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "admin-pass-123"


@pytest.fixture(scope="session")
def settings() -> AppSettings:
    return AppSettings(
        jwt_secret="test-secret",
        jwt_expiration_hours=1,
        seed_demo_data=True,
        admin_email=ADMIN_EMAIL,
        admin_password=ADMIN_PASSWORD,
        rate_limit_max_requests=1000,
        rate_limit_window_seconds=3600,
        cors_origins="*",
        log_level="DEBUG",
    )


@pytest.fixture(scope="session")
def seeded_template(settings) -> MemStorage:
    # bcrypt is slow on purpose, hash the seed passwords once per session
    storage = MemStorage()
    seed_storage(storage, settings)
    return storage


@pytest.fixture
def storage(seeded_template) -> MemStorage:
    return copy.deepcopy(seeded_template)


@pytest.fixture
def empty_storage() -> MemStorage:
    return MemStorage()


@pytest.fixture
def client(settings, storage) -> TestClient:
    return TestClient(create_app(settings=settings, storage=storage))


def login(client: TestClient, email: str, password: str) -> dict:
    response = client.post("/api/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return response.json()


@pytest.fixture
def login_as(client):
    return lambda email, password: login(client, email, password)


@pytest.fixture
def admin_headers(client) -> dict:
    token = login(client, ADMIN_EMAIL, ADMIN_PASSWORD)["access_token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def demo_login(client) -> dict:
    return login(client, DEMO_USER_EMAIL, DEMO_USER_PASSWORD)


@pytest.fixture
def demo_headers(demo_login) -> dict:
    return {"Authorization": f"Bearer {demo_login['access_token']}"}
