"""
Tests for shared models.
"""

import pytest
from pydantic import ValidationError

from shared.models import UserIdentity


class TestUserIdentity:
    """Tests for the UserIdentity model."""

    def test_create_with_required_fields(self):
        """Should create identity with only id and email."""
        user = UserIdentity(id="rec-1", email="test@example.com")
        assert user.id == "rec-1"
        assert user.email == "test@example.com"

    def test_defaults(self):
        """Name should fall back to email and role to 'user'."""
        user = UserIdentity(id="rec-1", email="test@example.com")
        assert user.name == "test@example.com"
        assert user.role == "user"

    def test_empty_name_falls_back_to_email(self):
        """An empty name should be treated as missing."""
        user = UserIdentity(id="rec-1", email="test@example.com", name="")
        assert user.name == "test@example.com"

    def test_all_fields(self):
        """Should accept all fields."""
        user = UserIdentity(id="rec-1", email="a@b.co", name="Ann", role="admin")
        assert user.name == "Ann"
        assert user.role == "admin"

    def test_immutability(self):
        """Should be frozen/immutable."""
        user = UserIdentity(id="rec-1", email="test@example.com")
        with pytest.raises(ValidationError):
            user.id = "new-id"

    def test_extra_fields_ignored(self):
        """Should ignore extra fields from stored sessions."""
        user = UserIdentity.model_validate(
            {"id": "rec-1", "email": "test@example.com", "tier": "pro"}
        )
        assert not hasattr(user, "tier")

    def test_session_round_trip(self):
        """model_dump output should rebuild an equal identity."""
        user = UserIdentity(id="rec-1", email="test@example.com", name="Test", role="admin")
        assert UserIdentity.model_validate(user.model_dump()) == user
