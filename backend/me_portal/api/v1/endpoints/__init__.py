# API endpoints
from . import auth, health, teams, strategy, projects, livelihood, workshop

__all__ = ["auth", "health", "teams", "strategy", "projects", "livelihood", "workshop"]
