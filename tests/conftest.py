"""Pytest configuration for the admin console test suite."""

import os


def _ensure_test_env() -> None:
    """Keep the app from reaching the network during tests."""
    os.environ.setdefault("SEED_ENABLED", "false")
    os.environ.setdefault("APP_ENV", "test")


_ensure_test_env()

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from admin_console.main import create_app  # noqa: E402
from admin_console.repositories.directory import DirectoryRepository  # noqa: E402
from tests.helpers import sample_records  # noqa: E402


@pytest.fixture
def directory_repo() -> DirectoryRepository:
    return DirectoryRepository(sample_records())


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def login(client):
    """Log the test client in as one of the demo accounts."""

    def _login(credentials: tuple[str, str]) -> dict:
        email, password = credentials
        response = client.post("/api/v1/auth/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        return response.json()["data"]

    return _login
