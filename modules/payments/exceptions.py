"""
Payments module exceptions.

These exceptions are raised by the payment link service and caught by
the payment routes, which show their message to the user.
"""

from decimal import Decimal
from typing import Optional

from shared.exceptions import ValidationError, ExternalServiceError

PAYMENT_PROVIDER = "stripe"


class InvalidPaymentRequestError(ValidationError):
    """Raised when a payment link request fails validation."""

    def __init__(self, message: str, amount: Optional[Decimal] = None):
        super().__init__(
            message,
            code="INVALID_PAYMENT_REQUEST",
            details={"amount": str(amount)} if amount is not None else {},
        )


class PaymentProviderError(ExternalServiceError):
    """Raised when a call to the payment provider fails."""

    def __init__(self, message: str, provider_error: Optional[str] = None):
        super().__init__(
            message,
            service=PAYMENT_PROVIDER,
            code="PAYMENT_PROVIDER_ERROR",
            details={"provider_error": provider_error} if provider_error else {},
        )
