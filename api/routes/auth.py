"""
Login and logout pages.
"""

import logging

from fastapi import APIRouter, Depends, Form
from fastapi.responses import RedirectResponse

from modules.auth.interfaces import IAuthService
from shared.exceptions import ExternalServiceError
from ..context import RequestContext, get_request_context
from ..dependencies import get_auth_service
from ..forms import LoginForm
from ..middleware.auth import AnonymousOnly, HOME_PATH, LOGIN_PATH
from ..templating import render

logger = logging.getLogger(__name__)

router = APIRouter()

LOGIN_TEMPLATE = "auth/login.html"
LOGIN_TITLE = "Sign In"
INVALID_CREDENTIALS = "Invalid email or password"


@router.get("/login", dependencies=[AnonymousOnly])
async def login_page(
    context: RequestContext = Depends(get_request_context),
):
    """Show the login form."""
    return render(context, LOGIN_TEMPLATE, title=LOGIN_TITLE, errors=[], email="")


@router.post("/login")
async def login(
    email: str = Form(default=""),
    password: str = Form(default=""),
    context: RequestContext = Depends(get_request_context),
    auth: IAuthService = Depends(get_auth_service),
):
    """
    Check the submitted credentials.

    Wrong credentials and record store failures show the same message;
    only the logs tell them apart.
    """
    form = LoginForm(email=email, password=password)
    errors = form.validate_fields()
    if errors:
        return render(context, LOGIN_TEMPLATE, title=LOGIN_TITLE, errors=errors, email=email)

    try:
        user = await auth.authenticate(form.email, form.password)
    except ExternalServiceError as e:
        logger.error("Login unavailable: %s", e.to_dict())
        user = None

    if user is None:
        return render(
            context,
            LOGIN_TEMPLATE,
            title=LOGIN_TITLE,
            errors=[INVALID_CREDENTIALS],
            email=email,
        )

    context.sign_in(user)
    context.flash("success", "Welcome back!")
    return RedirectResponse(HOME_PATH, status_code=302)


@router.api_route("/logout", methods=["GET", "POST"])
async def logout(
    context: RequestContext = Depends(get_request_context),
):
    """End the session and go back to the login page."""
    user = context.user
    context.sign_out()
    if user is not None:
        logger.info("User %s logged out", user.id)
    return RedirectResponse(LOGIN_PATH, status_code=302)
