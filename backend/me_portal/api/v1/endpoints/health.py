from fastapi import APIRouter

from me_portal.core.config import settings

router = APIRouter()


@router.get("/health", tags=["Health"])
async def health_check():
    """Liveness probe; does not touch the database"""
    return {
        "status": "healthy",
        "app_name": settings.APP_NAME,
        "environment": settings.ENVIRONMENT,
    }
