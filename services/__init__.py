"""Services module for the Dhamira web gateway."""

from .auth_backend_client import (
    AuthBackendClient,
    UpstreamFailure,
    UpstreamRejection,
    UpstreamResult,
    UpstreamSuccess,
)
from .analytics_service import fetch_mock_analytics

__all__ = [
    "AuthBackendClient",
    "UpstreamFailure",
    "UpstreamRejection",
    "UpstreamResult",
    "UpstreamSuccess",
    "fetch_mock_analytics",
]
