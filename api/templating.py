"""
Server-side template rendering.

Every page goes through render(), which drains the flash queue so each
message is shown exactly once.
"""

from pathlib import Path
from typing import Any

from fastapi.templating import Jinja2Templates
from starlette.responses import Response

from .context import RequestContext

TEMPLATES_DIR = Path(__file__).parent / "templates"
STATIC_DIR = Path(__file__).parent / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render(
    context: RequestContext,
    template: str,
    status_code: int = 200,
    **values: Any,
) -> Response:
    """
    Render a template with the current user and pending flash messages.

    Args:
        context: Request context for the current request
        template: Template path relative to the templates directory
        status_code: HTTP status of the response
        **values: Extra template variables

    Returns:
        The rendered HTML response
    """
    flashes = context.consume_flashes()
    page = {
        "user": context.user,
        "flashes": flashes,
        **values,
    }
    return templates.TemplateResponse(
        context.request,
        template,
        page,
        status_code=status_code,
    )
