"""
Upstream authentication backend client.

Forwards login credentials to the lending backend and classifies the
outcome so the login route can pick its response without relying on
exceptions for control flow.
"""

import json
from dataclasses import dataclass
from typing import Any, Optional, Union

import httpx
from opentelemetry import trace
from opentelemetry.propagate import inject

from core.metrics import metrics
from models.auth import UpstreamAuthPayload

tracer = trace.get_tracer(__name__)

LOGIN_PATH = "/api/auth/login"


@dataclass
class UpstreamSuccess:
    """The backend accepted the credentials (2xx)."""
    status_code: int
    payload: Any

    @property
    def token(self) -> Optional[str]:
        if not isinstance(self.payload, dict):
            return None
        return UpstreamAuthPayload(self.payload).token


@dataclass
class UpstreamRejection:
    """The backend answered with a non-2xx status."""
    status_code: int
    message: Any


@dataclass
class UpstreamFailure:
    """The call could not be completed or the reply was not JSON."""
    error: Exception


UpstreamResult = Union[UpstreamSuccess, UpstreamRejection, UpstreamFailure]


class AuthBackendClient:
    """Client for the backend's authentication API.

    ``base_url`` is used as given and must already be normalized, as done by
    ``GatewaySettings.resolve_base_url``.
    """

    def __init__(self, base_url: str, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url
        self.transport = transport

    @property
    def login_url(self) -> str:
        return f"{self.base_url}{LOGIN_PATH}"

    async def login(self, username: str, password: str) -> UpstreamResult:
        """
        Submit credentials to the backend login endpoint.

        A single attempt is made with httpx's default timeout.

        Args:
            username: Username as typed by the user
            password: Plain password, forwarded untouched

        Returns:
            UpstreamSuccess, UpstreamRejection or UpstreamFailure
        """
        with tracer.start_as_current_span("auth_backend_login") as span:
            headers = {"Content-Type": "application/json"}
            inject(headers)  # Inject OpenTelemetry trace context

            try:
                with metrics.time_upstream("login"):
                    async with httpx.AsyncClient(transport=self.transport) as client:
                        response = await client.post(
                            self.login_url,
                            content=json.dumps({"username": username, "password": password}),
                            headers=headers
                        )
            except httpx.RequestError as e:
                metrics.record_upstream_request("login", "error")
                span.record_exception(e)
                return UpstreamFailure(error=e)

            metrics.record_upstream_request("login", str(response.status_code))
            span.set_attributes({"http.status_code": response.status_code})

            try:
                data = response.json()
            except ValueError as e:
                span.record_exception(e)
                return UpstreamFailure(error=e)

            if not response.is_success:
                message = UpstreamAuthPayload(data).message if isinstance(data, dict) else None
                return UpstreamRejection(status_code=response.status_code, message=message)

            return UpstreamSuccess(status_code=response.status_code, payload=data)
