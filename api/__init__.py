"""
Paylinks web package.

Provides the FastAPI application that serves the login and payment link pages.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
