"""
Payment link pages.

All routes here require a signed-in user.
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Form
from fastapi.responses import RedirectResponse

from modules.payments.interfaces import IPaymentLinkService
from modules.payments.models import CREATOR_METADATA_KEY
from shared.config import get_settings
from shared.exceptions import PaylinksError
from shared.models import UserIdentity
from ..context import RequestContext, get_request_context
from ..dependencies import get_payment_link_service
from ..forms import PaymentLinkForm
from ..middleware.auth import RequireAuth, HOME_PATH
from ..templating import render

logger = logging.getLogger(__name__)

router = APIRouter()

CREATE_TEMPLATE = "payment/create.html"
CREATE_TITLE = "Create Payment Link"
LINKS_PAGE_SIZE = 20


def _render_create_form(context: RequestContext, form_data: dict, errors: list[str]):
    return render(
        context,
        CREATE_TEMPLATE,
        title=CREATE_TITLE,
        errors=errors,
        form_data=form_data,
        stripe_publishable_key=get_settings().stripe_publishable_key,
    )


@router.get("/create")
async def create_page(
    context: RequestContext = Depends(get_request_context),
    user: UserIdentity = RequireAuth,
):
    """
    Show the payment link form.

    Query parameters pre-fill the form fields.
    """
    form = PaymentLinkForm.model_validate(dict(context.request.query_params))
    return _render_create_form(context, form.model_dump(), errors=[])


@router.post("/create")
async def create_link(
    name: str = Form(default=""),
    description: str = Form(default=""),
    amount: str = Form(default=""),
    currency: str = Form(default=""),
    quantity: str = Form(default=""),
    context: RequestContext = Depends(get_request_context),
    user: UserIdentity = RequireAuth,
    payments: IPaymentLinkService = Depends(get_payment_link_service),
):
    """Validate the form and create a payment link for the current user."""
    form = PaymentLinkForm(
        name=name,
        description=description,
        amount=amount,
        currency=currency,
        quantity=quantity,
    )
    request, errors = form.validate_fields()
    if errors:
        return _render_create_form(context, form.model_dump(), errors=errors)

    metadata = {
        CREATOR_METADATA_KEY: user.id,
        "created_at": datetime.now(timezone.utc).isoformat(),
    }

    try:
        payment_link = await payments.create_link(request, user.id, metadata=metadata)
    except PaylinksError as e:
        logger.error("Payment link creation failed for %s: %s", user.id, e.to_dict())
        context.flash("error", e.message)
        return _render_create_form(context, form.model_dump(), errors=[])

    context.flash("success", "Payment link created successfully!")
    return render(
        context,
        "payment/success.html",
        title="Payment Link Created",
        payment_link=payment_link,
    )


@router.get("/links")
async def list_links(
    context: RequestContext = Depends(get_request_context),
    user: UserIdentity = RequireAuth,
    payments: IPaymentLinkService = Depends(get_payment_link_service),
):
    """List the payment links created by the current user."""
    try:
        links = await payments.list_links(user.id, LINKS_PAGE_SIZE)
    except PaylinksError as e:
        logger.error("Payment link listing failed for %s: %s", user.id, e.to_dict())
        context.flash("error", "Failed to load payment links")
        return RedirectResponse(HOME_PATH, status_code=302)

    return render(
        context,
        "payment/links.html",
        title="My Payment Links",
        payment_links=links,
    )
