"""
Session authentication guards.

Route dependencies that let a request through or send it elsewhere based
on whether the session holds a signed-in user.
"""

from fastapi import Depends

from shared.models import UserIdentity
from ..context import RequestContext, get_request_context

LOGIN_PATH = "/auth/login"
HOME_PATH = "/payment/create"


class GuardRedirect(Exception):
    """
    Raised by a guard to stop the request before the handler runs.

    The app turns it into a redirect to ``location``.
    """

    def __init__(self, location: str):
        super().__init__(location)
        self.location = location


async def require_auth(
    context: RequestContext = Depends(get_request_context),
) -> UserIdentity:
    """
    Dependency that requires a signed-in user.

    Anonymous requests get an error flash and are redirected to the
    login page.

    Usage:
        @router.get("/protected")
        async def protected_route(user: UserIdentity = Depends(require_auth)):
            return {"user_id": user.id}
    """
    user = context.user
    if user is None:
        context.flash("error", "Please log in to access this page")
        raise GuardRedirect(LOGIN_PATH)
    return user


async def redirect_if_authenticated(
    context: RequestContext = Depends(get_request_context),
) -> None:
    """
    Dependency for pages only anonymous users should see.

    Signed-in users are redirected to the payment creation page.
    """
    if context.is_authenticated:
        raise GuardRedirect(HOME_PATH)


# Aliases for cleaner route definitions
RequireAuth = Depends(require_auth)
AnonymousOnly = Depends(redirect_if_authenticated)
