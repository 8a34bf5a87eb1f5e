from fastapi import APIRouter, Depends, Request

from me_portal.models import Staff, Team
from me_portal.modules.auth import Action, require_permission
from me_portal.schemas.team import TeamCreate, TeamResponse
from me_portal.services.record_store import RecordStore, get_record_store
from me_portal.api.v1.views import create_record, list_page

router = APIRouter()


async def team_page(store: RecordStore) -> dict:
    return {"teams": await store.find_many(Team)}


@router.get("")
async def list_teams(
    request: Request,
    current_user: Staff = Depends(require_permission(Action.VIEW_RECORDS)),
    store: RecordStore = Depends(get_record_store),
):
    """All teams"""
    return await list_page(
        request, store, current_user,
        template="team.html",
        page_context=team_page,
        json_lists={"teams": TeamResponse},
    )


@router.post("")
async def create_team(
    request: Request,
    current_user: Staff = Depends(require_permission(Action.CREATE_TEAM)),
    store: RecordStore = Depends(get_record_store),
):
    """Create a team (ADMIN only)"""
    return await create_record(
        request, store, current_user,
        schema=TeamCreate,
        model=Team,
        response_schema=TeamResponse,
        template="team.html",
        page_context=team_page,
        redirect_to="/team",
    )
