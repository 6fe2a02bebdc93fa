"""
Authentication module interface.

Route handlers depend on IAuthService, not the concrete implementation.
This enables testing with mocks and swapping the record store.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import UserIdentity


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for credential verification.

    Implementations must provide all these methods.
    """

    async def authenticate(self, email: str, password: str) -> Optional[UserIdentity]:
        """
        Verify an email/password pair against the record store.

        Args:
            email: Email address, matched exactly
            password: Plain-text password

        Returns:
            UserIdentity on success, None when nothing matches

        Raises:
            AuthServiceUnavailableError: If the record store cannot be queried
            InvalidUserRecordError: If the matching row is malformed
        """
        ...

    async def get_user_by_id(self, user_id: str) -> Optional[UserIdentity]:
        """
        Look up a user by record identifier.

        Args:
            user_id: Record store identifier

        Returns:
            UserIdentity if found, None otherwise (including on store errors)
        """
        ...
