"""
Payments module data models.

These models define the data structures used by the payment link service
and exposed to the routes through the interface.
"""

from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field

# Metadata key holding the creator identity on provider-side links
CREATOR_METADATA_KEY = "created_by"

# Smallest chargeable amount, in minor units
MINIMUM_MINOR_UNITS = 50


class Currency(str, Enum):
    """Currencies a payment link can be priced in."""

    USD = "usd"
    EUR = "eur"
    GBP = "gbp"
    CAD = "cad"
    AUD = "aud"


def to_minor_units(amount: Decimal) -> int:
    """Convert a major-unit amount to minor units (x100, rounded half up)."""
    return int((Decimal(amount) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class PaymentLinkRequest(BaseModel):
    """
    Parameters for a new payment link.

    Limits on user input are enforced by the create form; the service
    re-checks the required fields and the minimum amount.
    """

    name: str = Field(default="", description="Product name")
    description: Optional[str] = Field(None, description="Product description")
    amount: Optional[Decimal] = Field(None, description="Price in major units")
    currency: Currency = Field(default=Currency.USD, description="Price currency")
    quantity: int = Field(default=1, description="Line item quantity")

    @property
    def product_description(self) -> str:
        """Description sent to the provider, synthesized when empty."""
        return self.description or f"Payment for {self.name}"


class PaymentLink(BaseModel):
    """
    A hosted payment link.

    Links are owned by the provider. Links returned by create carry the
    caller's own name/amount/currency; listed links only carry what the
    provider returns.
    """

    id: str = Field(..., description="Provider link ID")
    url: str = Field(..., description="Public checkout URL")
    active: bool = Field(default=True, description="Whether the link accepts payments")
    created: Optional[datetime] = Field(None, description="Creation time (UTC)")
    name: Optional[str] = Field(None, description="Product name")
    amount: Optional[Decimal] = Field(None, description="Price in major units")
    currency: Optional[Currency] = Field(None, description="Price currency")
    created_by: Optional[str] = Field(None, description="Creator identity")
    metadata: dict[str, str] = Field(default_factory=dict, description="Provider metadata")

    @classmethod
    def from_provider(cls, link: Any, **overrides: Any) -> "PaymentLink":
        """Build from a provider payment link object."""
        metadata = dict(getattr(link, "metadata", None) or {})
        created = getattr(link, "created", None)
        data = {
            "id": link.id,
            "url": link.url,
            "active": bool(getattr(link, "active", True)),
            "created": datetime.fromtimestamp(created, tz=timezone.utc) if created else None,
            "created_by": metadata.get(CREATOR_METADATA_KEY),
            "metadata": metadata,
        }
        data.update(overrides)
        return cls(**data)
