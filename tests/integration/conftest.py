"""
Pytest configuration and fixtures for the web gateway integration tests.
"""

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from core.config import GatewaySettings
from tests.mock.auth_backend_mock import MockAuthBackend

BACKEND_URL = "http://backend.test/"


@pytest.fixture(scope="function")
def mock_backend():
    """Provide a fresh in-process mock of the lending backend."""
    return MockAuthBackend()


@pytest.fixture(scope="function")
def gateway_settings():
    """Settings pointing the gateway at the mock backend."""
    return GatewaySettings(public_api_url=BACKEND_URL, mock_analytics_delay=0)


@pytest.fixture(scope="function")
def app(gateway_settings, mock_backend):
    """
    Provide the FastAPI application wired to the mock backend.

    Tests may replace the overrides to simulate other configurations.
    """
    from api.main import app
    from api.dependencies import get_settings, get_upstream_transport

    app.dependency_overrides[get_settings] = lambda: gateway_settings
    app.dependency_overrides[get_upstream_transport] = lambda: mock_backend.transport
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def test_client(app):
    """
    Provide async HTTP test client.
    
    Args:
        app: FastAPI application instance
        
    Yields:
        AsyncClient for making HTTP requests
    """
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as client:
        yield client


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test"
    )
