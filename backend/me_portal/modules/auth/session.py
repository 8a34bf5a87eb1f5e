"""
Session cookie handling.

The cookie carries a signed token holding only the staff id. Reading a
missing or tampered cookie is not an error; it just means "no session".
"""
from typing import Optional, Union

from fastapi import Request, Response
from fastapi.responses import RedirectResponse

from me_portal.core.config import settings
from me_portal.core.exceptions import UnauthenticatedError
from me_portal.core.security import create_session_token, decode_session_token


def _cookie_options() -> dict:
    return {
        "path": "/",
        "httponly": True,
        "samesite": "lax",
        "secure": settings.cookie_secure,
    }


def requested_path(request: Request) -> str:
    """Path (and query) the caller asked for, used as the post-login target"""
    path = request.url.path
    if request.url.query:
        path = f"{path}?{request.url.query}"
    return path


def create_session(response: Response, user_id: Union[int, str]) -> Response:
    """Attach a fresh session cookie for user_id to the response"""
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=create_session_token(user_id),
        max_age=settings.session_max_age_seconds,
        **_cookie_options(),
    )
    return response


def get_session_user_id(request: Request) -> Optional[int]:
    return decode_session_token(request.cookies.get(settings.SESSION_COOKIE_NAME))


def require_user_id(request: Request) -> int:
    """Staff id from the session, or UnauthenticatedError carrying the requested path"""
    user_id = get_session_user_id(request)
    if user_id is None:
        raise UnauthenticatedError(redirect_to=requested_path(request))
    return user_id


def destroy_session(response: Response) -> Response:
    response.delete_cookie(key=settings.SESSION_COOKIE_NAME, **_cookie_options())
    return response


def logout_response(redirect_to: str = "/login") -> RedirectResponse:
    return destroy_session(RedirectResponse(url=redirect_to, status_code=302))
