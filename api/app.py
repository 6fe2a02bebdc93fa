"""
FastAPI application factory.

Creates and configures the FastAPI application instance: security headers,
CORS, signed session cookie, static files, routes and error pages.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware

from shared.config import get_settings as get_shared_settings
from .config import get_settings
from .context import RequestContext, get_request_context
from .middleware.auth import GuardRedirect, HOME_PATH, LOGIN_PATH
from .middleware.security import SecurityHeadersMiddleware
from .routes import auth, health, payments
from .templating import STATIC_DIR, templates

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    logger.info(
        "Starting Paylinks on %s:%s (%s)",
        settings.host,
        settings.port,
        settings.environment,
    )
    yield
    # Shutdown
    logger.info("Shutting down Paylinks")


def _render_error(request: Request, message: str, status_code: int, error: str = ""):
    """Render the error page without touching the session."""
    return templates.TemplateResponse(
        request,
        "error.html",
        {"title": "Error", "message": message, "error": error, "user": None, "flashes": []},
        status_code=status_code,
    )


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()
    shared_settings = get_shared_settings()

    logging.basicConfig(
        level=shared_settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title=shared_settings.app_name,
        version=shared_settings.app_version,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.debug else None,
    )

    # Middleware: the last one added runs first
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret,
        session_cookie=settings.session_cookie,
        max_age=settings.session_max_age,
        same_site="lax",
        https_only=settings.is_production,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )
    app.add_middleware(SecurityHeadersMiddleware, hsts=settings.is_production)

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    # Register routes
    app.include_router(health.router, tags=["health"])
    app.include_router(auth.router, prefix="/auth", tags=["auth"])
    app.include_router(payments.router, prefix="/payment", tags=["payment"])

    @app.get("/", include_in_schema=False)
    async def home(context: RequestContext = Depends(get_request_context)):
        """Send users to the page that fits their session state."""
        target = HOME_PATH if context.is_authenticated else LOGIN_PATH
        return RedirectResponse(target, status_code=302)

    @app.exception_handler(GuardRedirect)
    async def guard_redirect_handler(request: Request, exc: GuardRedirect):
        return RedirectResponse(exc.location, status_code=302)

    @app.exception_handler(StarletteHTTPException)
    async def not_found_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code != 404:
            return await http_exception_handler(request, exc)
        return _render_error(request, "Page not found", 404)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _render_error(
            request,
            "Something went wrong!",
            500,
            error=repr(exc) if settings.debug else "",
        )

    return app


# Application instance for uvicorn
app = create_app()
