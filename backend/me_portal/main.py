from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, RedirectResponse
from contextlib import asynccontextmanager
from slowapi.errors import RateLimitExceeded

from me_portal.core.config import settings, DEVELOPMENT_SESSION_SECRET
from me_portal.core.database import init_db, close_db
from me_portal.core.exceptions import (
    GENERIC_ERROR_MESSAGE,
    PortalError,
    UnauthenticatedError,
    UpstreamError,
    error_response,
)
from me_portal.core.logging_config import logger
from me_portal.core.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware
from me_portal.core.rate_limiter import limiter, rate_limit_exceeded_handler
from me_portal.modules.auth.session import destroy_session
from me_portal.api.v1.router import api_router
from me_portal.api.v1.views import render, wants_html


async def validate_critical_config():
    """Validate critical configuration at startup - fail fast if missing"""
    errors = []
    warnings = []

    if not settings.DATABASE_URL:
        errors.append("DATABASE_URL is not set")

    # Production without a secret never gets this far: Settings() refuses it
    if settings.using_fallback_secret:
        warnings.append(
            f"SESSION_SECRET not set - signing sessions with the development fallback "
            f"'{DEVELOPMENT_SESSION_SECRET}'"
        )

    if not settings.RATE_LIMIT_ENABLED:
        warnings.append("RATE_LIMIT_ENABLED is false - login attempts are not throttled")

    if errors:
        for err in errors:
            logger.critical(f"[Startup] CRITICAL: {err}")
        raise RuntimeError(f"Missing critical configuration: {', '.join(errors)}")

    for warn in warnings:
        logger.warning(f"[Startup] WARNING: {warn}")

    logger.info("[Startup] ✓ Critical configuration validated")
    return True


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan event handler for startup and shutdown"""
    logger.info("=" * 60)
    logger.info(f"Starting {settings.APP_NAME}...")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info("=" * 60)

    await validate_critical_config()
    await init_db()
    logger.info("[Startup] Database tables ready")

    yield

    logger.info(f"Shutting down {settings.APP_NAME}...")
    await close_db()


app = FastAPI(
    title=settings.APP_NAME,
    description="Monitoring & evaluation portal: teams, strategic objectives, projects and participant records",
    version="1.0.0",
    lifespan=lifespan,
    redirect_slashes=False,
)

# Add rate limiter state and exception handler
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

# Add middleware (order matters - last added runs first)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestLoggingMiddleware)


# Exception handlers
@app.exception_handler(UnauthenticatedError)
async def unauthenticated_handler(request: Request, exc: UnauthenticatedError):
    response = RedirectResponse(url=exc.login_url, status_code=302)
    if exc.clear_session:
        destroy_session(response)
    return response


@app.exception_handler(PortalError)
async def portal_error_handler(request: Request, exc: PortalError):
    if isinstance(exc, UpstreamError):
        logger.warning(
            f"Upstream failure during {exc.operation}",
            extra={"event_type": "upstream_failure", "operation": exc.operation},
        )
    if wants_html(request):
        return render(
            request,
            "error.html",
            {"user": None, "status_code": exc.status_code, "message": exc.message},
            status_code=exc.status_code,
        )
    return JSONResponse(status_code=exc.status_code, content=error_response(exc))


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.log_error_with_context(exc, context=f"{request.method} {request.url.path}")
    if wants_html(request):
        return render(
            request,
            "error.html",
            {"user": None, "status_code": 500, "message": GENERIC_ERROR_MESSAGE},
            status_code=500,
        )
    return JSONResponse(status_code=500, content={"error": GENERIC_ERROR_MESSAGE})


app.include_router(api_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "me_portal.main:app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        reload=settings.DEBUG
    )
