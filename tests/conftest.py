"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
import bcrypt
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_auth_service, get_payment_link_service, reset_container
from shared.config import get_settings
from shared.database import reset_client_cache
from shared.models import UserIdentity


TEST_EMAIL = "test@example.com"
TEST_PASSWORD = "correct-horse-battery"

# Low work factor keeps the suite fast; production hashes use 12
TEST_PASSWORD_HASH = bcrypt.hashpw(
    TEST_PASSWORD.encode("utf-8"), bcrypt.gensalt(rounds=4)
).decode("utf-8")


def _user_row(**overrides) -> dict:
    row = {
        "id": "rec-123",
        "email": TEST_EMAIL,
        "password_hash": TEST_PASSWORD_HASH,
        "name": "Test User",
        "role": "admin",
    }
    row.update(overrides)
    return row


def _submit_login(client: TestClient, email: str = TEST_EMAIL, password: str = TEST_PASSWORD):
    """Submit the login form without following the redirect."""
    return client.post(
        "/auth/login",
        data={"email": email, "password": password},
        follow_redirects=False,
    )


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset cached services, clients and settings around each test."""
    reset_container()
    reset_client_cache()
    get_settings.cache_clear()
    yield
    reset_container()
    reset_client_cache()
    get_settings.cache_clear()


@pytest.fixture
def make_user_row():
    """
    Factory for credential table rows.

    Call with column overrides; the default row belongs to the test user
    and carries a hash of TEST_PASSWORD.
    """
    return _user_row


@pytest.fixture
def credentials() -> tuple[str, str]:
    """Email and plain password that match the default user row."""
    return TEST_EMAIL, TEST_PASSWORD


@pytest.fixture
def submit_login():
    """Helper that posts the login form and returns the raw response."""
    return _submit_login


@pytest.fixture
def test_user() -> UserIdentity:
    """Provide a consistent signed-in identity."""
    return UserIdentity(id="rec-123", email=TEST_EMAIL, name="Test User", role="admin")


@pytest.fixture
def mock_auth_service(test_user: UserIdentity) -> AsyncMock:
    """Auth service that accepts any credentials as the test user."""
    service = AsyncMock()
    service.authenticate.return_value = test_user
    return service


@pytest.fixture
def mock_payment_service() -> AsyncMock:
    """Payment link service with no configured results."""
    return AsyncMock()


@pytest.fixture
def app(mock_auth_service: AsyncMock, mock_payment_service: AsyncMock):
    """Create a fresh app with mocked services."""
    app = create_app()
    app.dependency_overrides[get_auth_service] = lambda: mock_auth_service
    app.dependency_overrides[get_payment_link_service] = lambda: mock_payment_service
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    """Anonymous test client."""
    return TestClient(app)


@pytest.fixture
def auth_client(client: TestClient) -> TestClient:
    """Test client with a signed-in session and no pending flashes."""
    response = _submit_login(client)
    assert response.status_code == 302
    # Drain the welcome flash so tests start from an empty queue
    client.get("/payment/create")
    return client
