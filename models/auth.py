"""Authentication models."""

from typing import Any, Dict, Optional

from pydantic import BaseModel


class LoginRequest(BaseModel):
    """Login request."""
    username: str
    password: str


class MessageResponse(BaseModel):
    """Body of every error and status reply from the gateway."""
    message: str


class UpstreamAuthPayload:
    """
    JSON object returned by the upstream login endpoint.

    The payload is kept as-is and forwarded without reinterpretation; only
    ``token`` and ``message`` carry meaning for the gateway.
    """

    def __init__(self, data: Dict[str, Any]):
        self.data = data

    @property
    def token(self) -> Optional[str]:
        token = self.data.get("token")
        if isinstance(token, str) and token:
            return token
        return None

    @property
    def message(self) -> Any:
        # Any truthy value is relayed, not only strings
        return self.data.get("message") or None
