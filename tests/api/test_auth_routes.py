"""Tests for the login and logout pages."""

from unittest.mock import MagicMock

from api.dependencies import get_auth_service
from modules.auth.exceptions import AuthServiceUnavailableError
from modules.auth.models import UserRecord
from modules.auth.service import AuthService


class TestLoginPage:
    def test_login_page(self, client):
        """Anonymous users see the login form."""
        response = client.get("/auth/login")
        assert response.status_code == 200
        assert "Sign In" in response.text
        assert 'name="email"' in response.text

    def test_login_page_redirects_when_signed_in(self, auth_client):
        """Signed-in users are sent to the create page."""
        response = auth_client.get("/auth/login", follow_redirects=False)
        assert response.status_code == 302
        assert response.headers["location"] == "/payment/create"


class TestLogin:
    def test_valid_login(self, client, submit_login, mock_auth_service, credentials):
        """Valid credentials sign in and show a one-time welcome message."""
        email, password = credentials
        response = submit_login(client)

        assert response.status_code == 302
        assert response.headers["location"] == "/payment/create"
        mock_auth_service.authenticate.assert_awaited_once_with(email, password)

        first = client.get("/payment/create")
        assert first.status_code == 200
        assert "Welcome back!" in first.text
        assert "Test User" in first.text

        second = client.get("/payment/create")
        assert "Welcome back!" not in second.text

    def test_invalid_email(self, client, submit_login, mock_auth_service):
        """A malformed email is rejected before authentication."""
        response = submit_login(client, email="not-an-email")

        assert response.status_code == 200
        assert "Please enter a valid email address" in response.text
        assert 'value="not-an-email"' in response.text
        mock_auth_service.authenticate.assert_not_called()

    def test_empty_password(self, client, submit_login, mock_auth_service):
        """An empty password is rejected before authentication."""
        response = submit_login(client, password="")

        assert response.status_code == 200
        assert "Password is required" in response.text
        mock_auth_service.authenticate.assert_not_called()

    def test_wrong_password(self, app, client, submit_login, make_user_row):
        """A wrong password re-renders the form and leaves the session anonymous."""
        repository = MagicMock()
        repository.find_by_email.return_value = UserRecord.from_row(make_user_row())
        app.dependency_overrides[get_auth_service] = lambda: AuthService(repository=repository)

        response = submit_login(client, password="wrong-password")

        assert response.status_code == 200
        assert "Invalid email or password" in response.text
        guarded = client.get("/payment/create", follow_redirects=False)
        assert guarded.status_code == 302
        assert guarded.headers["location"] == "/auth/login"

    def test_unknown_email(self, client, submit_login, mock_auth_service):
        """No matching record shows the generic message."""
        mock_auth_service.authenticate.return_value = None

        response = submit_login(client, email="nobody@example.com")

        assert response.status_code == 200
        assert "Invalid email or password" in response.text
        assert "Welcome back!" not in response.text

    def test_service_unavailable(self, client, submit_login, mock_auth_service, caplog):
        """Record store failures look the same as wrong credentials but are logged."""
        mock_auth_service.authenticate.side_effect = AuthServiceUnavailableError("timeout")

        response = submit_login(client)

        assert response.status_code == 200
        assert "Invalid email or password" in response.text
        assert "AUTH_SERVICE_UNAVAILABLE" in caplog.text
        assert "AUTH_SERVICE_UNAVAILABLE" not in response.text

    def test_login_twice(self, client, submit_login):
        """Posting valid credentials again keeps the user signed in."""
        assert submit_login(client).status_code == 302
        assert submit_login(client).status_code == 302
        response = client.get("/payment/create", follow_redirects=False)
        assert response.status_code == 200


class TestLogout:
    def test_logout_post(self, auth_client):
        """Logging out clears the session."""
        response = auth_client.post("/auth/logout", follow_redirects=False)

        assert response.status_code == 302
        assert response.headers["location"] == "/auth/login"
        guarded = auth_client.get("/payment/create", follow_redirects=False)
        assert guarded.headers["location"] == "/auth/login"

    def test_logout_get(self, auth_client):
        """GET also logs out."""
        response = auth_client.get("/auth/logout", follow_redirects=False)
        assert response.status_code == 302
        assert auth_client.get("/", follow_redirects=False).headers["location"] == "/auth/login"

    def test_logout_anonymous(self, client):
        """Logging out without a session still redirects."""
        response = client.get("/auth/logout", follow_redirects=False)
        assert response.status_code == 302
        assert response.headers["location"] == "/auth/login"
