"""Health check endpoints."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from core.config import GatewaySettings
from api.dependencies import get_settings

router = APIRouter(prefix="/api", tags=["health"])


def _readiness(settings: GatewaySettings):
    # Not ready until there is a backend to forward logins to
    if settings.resolve_base_url() is None:
        return JSONResponse(status_code=503, content={"status": "not_configured"})
    return {"status": "ready"}


@router.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@router.get("/ready")
async def ready(settings: GatewaySettings = Depends(get_settings)):
    """Readiness check endpoint."""
    return _readiness(settings)


# Root level health endpoint for Kubernetes probes
health_router = APIRouter(tags=["health"])


@health_router.get("/health")
async def health_root():
    """Health check endpoint at root level."""
    return {"status": "healthy"}


@health_router.get("/ready")
async def ready_root(settings: GatewaySettings = Depends(get_settings)):
    """Readiness check endpoint at root level."""
    return _readiness(settings)
