"""Session cookie carrying the backend-issued token."""

from fastapi import Response

COOKIE_NAME = "token"
COOKIE_PATH = "/"
COOKIE_MAX_AGE = 60 * 60 * 24 * 7  # 7 days


def set_session_cookie(response: Response, token: str) -> None:
    """Attach the token cookie read by server-side rendering and middleware."""
    response.set_cookie(
        key=COOKIE_NAME,
        value=token,
        max_age=COOKIE_MAX_AGE,
        path=COOKIE_PATH,
        secure=True,
        httponly=True,
        samesite="lax",
    )


def clear_session_cookie(response: Response) -> None:
    """Expire the token cookie; flags must match the ones it was set with."""
    response.delete_cookie(
        key=COOKIE_NAME,
        path=COOKIE_PATH,
        secure=True,
        httponly=True,
        samesite="lax",
    )
