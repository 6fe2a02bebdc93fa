"""
Payments module interface.

Routes depend on IPaymentLinkService, not the concrete implementation.
This keeps Stripe out of the route handlers and their tests.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import PaymentLink, PaymentLinkRequest


@runtime_checkable
class IPaymentLinkService(Protocol):
    """
    Interface for payment link operations.

    Links are stored only at the provider; every read goes back to it.
    """

    async def create_link(
        self,
        request: PaymentLinkRequest,
        creator_id: str,
        metadata: Optional[dict[str, str]] = None,
    ) -> PaymentLink:
        """
        Create a priced payment link.

        Args:
            request: Product, price and quantity for the link
            creator_id: Identity of the requesting user, stored as metadata
            metadata: Extra metadata to attach to the link

        Returns:
            The created PaymentLink

        Raises:
            InvalidPaymentRequestError: If name/amount are missing or the
                amount is below the minimum
            PaymentProviderError: If any provider call fails
        """
        ...

    async def list_links(self, creator_id: str, limit: int = 10) -> list[PaymentLink]:
        """
        List the links created by a user.

        Fetches the ``limit`` most recent links, then keeps the ones whose
        creator matches. Older links of a user can fall outside the window.

        Raises:
            PaymentProviderError: If the provider call fails
        """
        ...

    async def get_link(self, link_id: str) -> PaymentLink:
        """
        Retrieve one link by provider ID.

        Raises:
            PaymentProviderError: If the provider call fails
        """
        ...
