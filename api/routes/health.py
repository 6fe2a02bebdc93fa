"""
Health check endpoint.

Lets a load balancer or uptime monitor check the server is up without
a session.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from shared.config import get_settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the server is running. External services are not probed.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)
