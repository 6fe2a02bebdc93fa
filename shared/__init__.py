"""
Shared infrastructure for the Paylinks backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Record store client factory
- exceptions: Base exception classes
- models: The signed-in user identity

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    PaylinksError,
    ValidationError,
    ExternalServiceError,
)
from .models import UserIdentity

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "PaylinksError",
    "ValidationError",
    "ExternalServiceError",
    "UserIdentity",
]
