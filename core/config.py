"""Gateway configuration loaded from the environment."""

import logging
import os
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_MOCK_ANALYTICS_DELAY = 0.08


@dataclass(frozen=True)
class GatewaySettings:
    """Settings for the web gateway.

    ``public_api_url`` and ``api_base_url`` both point at the upstream
    backend; the public one wins when both are set.
    """

    public_api_url: Optional[str] = None
    api_base_url: Optional[str] = None
    mock_analytics_delay: float = DEFAULT_MOCK_ANALYTICS_DELAY

    def resolve_base_url(self) -> Optional[str]:
        """Return the upstream base URL without its trailing slash, or None."""
        base_url = self.public_api_url or self.api_base_url
        if not base_url:
            return None
        if base_url.endswith("/"):
            base_url = base_url[:-1]
        return base_url


def _read_delay() -> float:
    raw = os.getenv("MOCK_ANALYTICS_DELAY")
    if raw is None:
        return DEFAULT_MOCK_ANALYTICS_DELAY
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Invalid MOCK_ANALYTICS_DELAY {raw!r}, using {DEFAULT_MOCK_ANALYTICS_DELAY}")
        return DEFAULT_MOCK_ANALYTICS_DELAY


def load_settings() -> GatewaySettings:
    """Build settings from environment variables."""
    return GatewaySettings(
        public_api_url=os.getenv("NEXT_PUBLIC_API_URL") or None,
        api_base_url=os.getenv("API_BASE_URL") or None,
        mock_analytics_delay=_read_delay(),
    )
