"""
Redirect page tests.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_root_without_session_goes_to_login(test_client: AsyncClient):
    response = await test_client.get("/")

    assert response.status_code == 307
    assert response.headers["location"] == "/login"


@pytest.mark.asyncio
async def test_root_with_session_goes_to_dashboard(test_client: AsyncClient):
    response = await test_client.get("/", headers={"cookie": "token=abc123"})

    assert response.status_code == 307
    assert response.headers["location"] == "/dashboard"


@pytest.mark.asyncio
async def test_home_always_redirects_to_root(test_client: AsyncClient):
    """Test /home ignores the session and points at the application root."""
    for headers in (None, {"cookie": "token=abc123"}):
        response = await test_client.get("/home", headers=headers)

        assert response.status_code == 307
        assert response.headers["location"] == "/"
