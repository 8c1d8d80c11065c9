"""System router for non-versioned application endpoints.

Provides the index and liveness endpoints. These endpoints are
lightweight and side-effect free to support health checks and basic
discovery.
"""

from fastapi import APIRouter

from src.core.config import settings


system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    """Index endpoint - describes the stream endpoint.

    Returns:
        dict[str, str]: Service name, status, version and stream usage.
    """
    return {
        "message": f"{settings.app_name} API",
        "status": "operational",
        "version": settings.app_version,
        "stream": "/stream streams numbers via SSE. params: intervalMs,start,limit",
    }


@system_router.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint for monitoring and load balancers.

    Returns:
        dict[str, str]: Health status indicator.
    """
    return {"status": "healthy"}
