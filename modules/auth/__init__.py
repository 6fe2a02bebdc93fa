"""
Authentication module.

Verifies user credentials against the hosted record store.

Public API:
- IAuthService: Interface for auth operations
- UserRecord: Structured credential table row
- Password helpers: hash_password, verify_password
- Auth exceptions: AuthServiceUnavailableError, InvalidUserRecordError
"""

from .interfaces import IAuthService
from .models import UserRecord
from .passwords import hash_password, verify_password, SALT_ROUNDS
from .exceptions import (
    AuthServiceUnavailableError,
    InvalidUserRecordError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "UserRecord",
    # Passwords
    "hash_password",
    "verify_password",
    "SALT_ROUNDS",
    # Exceptions
    "AuthServiceUnavailableError",
    "InvalidUserRecordError",
]
