"""
Payment link service backed by Stripe.

Creates a Price with inline product data, then a Payment Link for it.
Creator identity is stored in the link metadata and used to filter lists.

stripe-python calls block, so each one runs in a worker thread and the
event loop keeps serving other requests meanwhile.
"""

import asyncio
import logging
from typing import Optional

import stripe

from shared.config import get_settings

from .interfaces import IPaymentLinkService
from .models import (
    PaymentLink,
    PaymentLinkRequest,
    CREATOR_METADATA_KEY,
    MINIMUM_MINOR_UNITS,
    to_minor_units,
)
from .exceptions import InvalidPaymentRequestError, PaymentProviderError

logger = logging.getLogger(__name__)


def _provider_failure(action: str, error: stripe.StripeError) -> PaymentProviderError:
    """Wrap a Stripe error, keeping the provider's own message."""
    return PaymentProviderError(
        f"Failed to {action}: {error.user_message or error}",
        provider_error=str(error),
    )


class StripePaymentLinkService(IPaymentLinkService):
    """
    Payment link service using the Stripe API.

    Every call passes the secret key explicitly instead of relying on
    the global ``stripe.api_key``.
    """

    def __init__(self, api_key: Optional[str] = None):
        self._api_key = api_key if api_key is not None else get_settings().stripe_secret_key

    async def create_link(
        self,
        request: PaymentLinkRequest,
        creator_id: str,
        metadata: Optional[dict[str, str]] = None,
    ) -> PaymentLink:
        """Create a Stripe price and a payment link for it."""
        if not request.name or request.amount is None:
            raise InvalidPaymentRequestError("Name and amount are required")

        unit_amount = to_minor_units(request.amount)
        if unit_amount < MINIMUM_MINOR_UNITS:
            raise InvalidPaymentRequestError(
                "Amount must be at least $0.50", amount=request.amount
            )

        try:
            price = await asyncio.to_thread(
                stripe.Price.create,
                api_key=self._api_key,
                unit_amount=unit_amount,
                currency=request.currency.value,
                product_data={
                    "name": request.name,
                    "metadata": {"description": request.product_description},
                },
            )
        except stripe.StripeError as e:
            logger.exception("Stripe price creation failed")
            raise _provider_failure("create payment link", e) from e

        link_metadata = dict(metadata or {})
        link_metadata[CREATOR_METADATA_KEY] = creator_id

        try:
            link = await asyncio.to_thread(
                stripe.PaymentLink.create,
                api_key=self._api_key,
                line_items=[{"price": price.id, "quantity": request.quantity}],
                metadata=link_metadata,
            )
        except stripe.StripeError as e:
            logger.exception("Stripe payment link creation failed for price %s", price.id)
            await self._deactivate_price(price.id)
            raise _provider_failure("create payment link", e) from e

        logger.info("Created payment link %s for %s", link.id, creator_id)
        return PaymentLink.from_provider(
            link,
            name=request.name,
            amount=request.amount,
            currency=request.currency,
        )

    async def list_links(self, creator_id: str, limit: int = 10) -> list[PaymentLink]:
        """List the most recent links, keeping those made by ``creator_id``."""
        try:
            page = await asyncio.to_thread(
                stripe.PaymentLink.list, api_key=self._api_key, limit=limit
            )
        except stripe.StripeError as e:
            logger.exception("Stripe payment link listing failed")
            raise _provider_failure("list payment links", e) from e

        links = [PaymentLink.from_provider(link) for link in page.data]
        return [link for link in links if link.created_by == creator_id]

    async def get_link(self, link_id: str) -> PaymentLink:
        """Retrieve a single payment link."""
        try:
            link = await asyncio.to_thread(
                stripe.PaymentLink.retrieve, link_id, api_key=self._api_key
            )
        except stripe.StripeError as e:
            logger.exception("Stripe payment link retrieval failed for %s", link_id)
            raise _provider_failure("retrieve payment link", e) from e
        return PaymentLink.from_provider(link)

    async def _deactivate_price(self, price_id: str) -> None:
        """Archive a price left behind by a failed link creation."""
        try:
            await asyncio.to_thread(
                stripe.Price.modify, price_id, api_key=self._api_key, active=False
            )
        except stripe.StripeError:
            logger.exception("Could not deactivate orphaned price %s", price_id)
            return
        logger.warning("Deactivated orphaned price %s", price_id)
