"""
Payments module.

Creates and lists hosted payment links through Stripe.

Public API:
- IPaymentLinkService: Interface for payment link operations
- PaymentLinkRequest / PaymentLink: Request and result models
- Currency: Supported currencies
- Payments exceptions: InvalidPaymentRequestError, PaymentProviderError
"""

from .interfaces import IPaymentLinkService
from .models import (
    Currency,
    PaymentLink,
    PaymentLinkRequest,
    CREATOR_METADATA_KEY,
    MINIMUM_MINOR_UNITS,
    to_minor_units,
)
from .exceptions import (
    InvalidPaymentRequestError,
    PaymentProviderError,
)

__all__ = [
    # Interface
    "IPaymentLinkService",
    # Models
    "Currency",
    "PaymentLink",
    "PaymentLinkRequest",
    "CREATOR_METADATA_KEY",
    "MINIMUM_MINOR_UNITS",
    "to_minor_units",
    # Exceptions
    "InvalidPaymentRequestError",
    "PaymentProviderError",
]
