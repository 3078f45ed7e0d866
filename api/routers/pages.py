"""Browser entry points that only redirect."""

from fastapi import APIRouter, Request
from fastapi.responses import RedirectResponse

from core.session_cookie import COOKIE_NAME

router = APIRouter(tags=["pages"])


@router.get("/", include_in_schema=False)
async def root(request: Request):
    """Send signed-in users to the dashboard and everyone else to login."""
    if request.cookies.get(COOKIE_NAME):
        return RedirectResponse(url="/dashboard")
    return RedirectResponse(url="/login")


@router.get("/home", include_in_schema=False)
async def home():
    """Redirect to the application root."""
    return RedirectResponse(url="/")
