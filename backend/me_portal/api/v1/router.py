from fastapi import APIRouter

from me_portal.api.v1.endpoints import (
    auth,
    health,
    teams,
    strategy,
    projects,
    livelihood,
    workshop,
)

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(health.router)
api_router.include_router(auth.router, tags=["Authentication"])
api_router.include_router(teams.router, prefix="/team", tags=["Teams"])
api_router.include_router(strategy.router, prefix="/strategy", tags=["Strategic Objectives"])
api_router.include_router(projects.router, prefix="/project", tags=["Projects"])
api_router.include_router(livelihood.router, prefix="/livelihood", tags=["Livelihoods"])
api_router.include_router(workshop.router, prefix="/workshop", tags=["Workshops"])
