"""
Authentication module exceptions.

A wrong password is not an error: authenticate() returns None. Only
record store trouble raises, so it can be logged apart from bad logins.
"""

from shared.exceptions import ExternalServiceError

RECORD_STORE = "record_store"


class AuthServiceUnavailableError(ExternalServiceError):
    """Raised when the record store cannot be queried."""

    def __init__(self, reason: str = ""):
        super().__init__(
            "Authentication service unavailable",
            service=RECORD_STORE,
            code="AUTH_SERVICE_UNAVAILABLE",
            details={"reason": reason} if reason else {},
        )


class InvalidUserRecordError(ExternalServiceError):
    """Raised when a record store row lacks a required field."""

    def __init__(self, field: str, record_id: str = ""):
        super().__init__(
            f"User record is missing required field: {field}",
            service=RECORD_STORE,
            code="INVALID_USER_RECORD",
            details={"field": field, "record_id": record_id},
        )
        self.field = field
