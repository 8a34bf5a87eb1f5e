"""
Login throttling
================
slowapi limiter keyed by client address, stored in process memory.
Only POST /login carries a limit (LOGIN_RATE_LIMIT, default 10/minute).
"""

from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from fastapi import Request
from fastapi.responses import JSONResponse

from me_portal.core.config import settings
from me_portal.core.logging_config import logger


limiter = Limiter(
    key_func=get_remote_address,
    storage_uri="memory://",
    strategy="fixed-window",
    enabled=settings.RATE_LIMIT_ENABLED,
)


def login_rate_limit():
    """Rate limit applied to the login action"""
    return limiter.limit(settings.LOGIN_RATE_LIMIT)


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    """429 with a Retry-After hint; the body never says which account was targeted"""
    logger.warning(
        f"[RateLimit] Exceeded for {get_remote_address(request)} on {request.url.path}: {exc.detail}",
        extra={"event_type": "rate_limit", "http_path": request.url.path},
    )
    return JSONResponse(
        status_code=429,
        content={"error": "Too many requests. Please try again later."},
        headers={"Retry-After": "60"},
    )
