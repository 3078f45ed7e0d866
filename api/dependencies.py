"""FastAPI dependency injection functions."""

from typing import Optional

import httpx

from core.config import GatewaySettings, load_settings


def get_settings() -> GatewaySettings:
    """Get gateway settings, read from the environment on every request."""
    return load_settings()


def get_upstream_transport() -> Optional[httpx.AsyncBaseTransport]:
    """Transport for upstream calls; None means httpx's default network transport."""
    return None

