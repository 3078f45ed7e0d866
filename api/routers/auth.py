"""Authentication endpoints proxied to the lending backend."""

import logging
from typing import Any, Optional

import httpx
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from models.auth import LoginRequest, MessageResponse
from services.auth_backend_client import (
    AuthBackendClient,
    UpstreamFailure,
    UpstreamRejection,
    UpstreamSuccess,
)
from core.config import GatewaySettings
from core.metrics import metrics
from core.session_cookie import clear_session_cookie, set_session_cookie
from api.dependencies import get_settings, get_upstream_transport

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["authentication"])


def _message(status_code: int, message: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


@router.post("/login")
async def login(
    login_request: LoginRequest,
    settings: GatewaySettings = Depends(get_settings),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_upstream_transport),
):
    """
    Forward credentials to the backend and relay its answer.

    On success the backend payload is returned unchanged and its token,
    if any, is also stored in an HttpOnly cookie.
    """
    try:
        base_url = settings.resolve_base_url()
        if base_url is None:
            logger.error("Login rejected: neither NEXT_PUBLIC_API_URL nor API_BASE_URL is set")
            metrics.record_login("misconfigured")
            return _message(500, "API base URL not configured")

        client = AuthBackendClient(base_url, transport=transport)
        result = await client.login(login_request.username, login_request.password)

        if isinstance(result, UpstreamRejection):
            logger.info(f"Backend rejected login with status {result.status_code}")
            metrics.record_login("rejected")
            return _message(result.status_code, result.message or "Login failed")

        if isinstance(result, UpstreamFailure):
            logger.error("/api/auth/login upstream call failed", exc_info=result.error)
            metrics.record_login("error")
            return _message(500, "Internal server error")

        if isinstance(result, UpstreamSuccess):
            response = JSONResponse(content=result.payload)
            if result.token:
                set_session_cookie(response, result.token)
            metrics.record_login("success")
            return response

        raise TypeError(f"Unexpected upstream result: {result!r}")

    except Exception:
        logger.exception("/api/auth/login error")
        metrics.record_login("error")
        return _message(500, "Internal server error")


@router.post("/logout", response_model=MessageResponse)
async def logout():
    """Clear the session cookie."""
    response = _message(200, "Logged out")
    clear_session_cookie(response)
    return response
