"""
Per-request context.

Handlers receive a RequestContext instead of reaching into the session
directly. It carries the signed-in identity and the flash queue, both
stored in the signed session cookie.
"""

from dataclasses import dataclass
from typing import Literal, Optional

from fastapi import Request
from pydantic import BaseModel

from shared.models import UserIdentity

SESSION_USER_KEY = "user"
SESSION_FLASH_KEY = "_flashes"

FlashCategory = Literal["success", "error"]


class FlashMessage(BaseModel):
    """A one-shot status message shown on the next rendered page."""

    category: FlashCategory
    text: str


@dataclass
class RequestContext:
    """
    Session state for one request.

    Flash messages queue up until consume_flashes() drains them; each
    message is returned exactly once.
    """

    request: Request

    @property
    def session(self) -> dict:
        return self.request.session

    @property
    def user(self) -> Optional[UserIdentity]:
        data = self.session.get(SESSION_USER_KEY)
        if not data:
            return None
        return UserIdentity.model_validate(data)

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def sign_in(self, user: UserIdentity) -> None:
        self.session[SESSION_USER_KEY] = user.model_dump()

    def sign_out(self) -> None:
        self.session.clear()

    def flash(self, category: FlashCategory, text: str) -> None:
        queue = list(self.session.get(SESSION_FLASH_KEY, []))
        queue.append(FlashMessage(category=category, text=text).model_dump())
        self.session[SESSION_FLASH_KEY] = queue

    def consume_flashes(self) -> list[FlashMessage]:
        queue = self.session.pop(SESSION_FLASH_KEY, [])
        return [FlashMessage.model_validate(item) for item in queue]


def get_request_context(request: Request) -> RequestContext:
    """FastAPI dependency for the request context."""
    return RequestContext(request)
