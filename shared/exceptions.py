"""
Error types shared by the Paylinks modules.

Services raise these; route handlers catch them and show ``message`` on
the page. ``code`` and ``details`` only go to the logs.
"""

from typing import Optional, Any


class PaylinksError(Exception):
    """
    Root of every error a service raises on purpose.

    ``code`` defaults to the class name so log lines stay greppable even
    when a subclass does not set one.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Structured form used in log records."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(PaylinksError):
    """A request was rejected before any outside call was made."""


class ExternalServiceError(PaylinksError):
    """The record store or the payment provider failed."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
