from fastapi import APIRouter, Depends, Request

from me_portal.models import Staff, StrategicObjective, Team
from me_portal.modules.auth import Action, require_permission
from me_portal.schemas.strategy import (
    StrategicObjectiveCreate,
    StrategicObjectiveListItem,
    StrategicObjectiveResponse,
)
from me_portal.schemas.team import TeamResponse
from me_portal.services.record_store import RecordStore, get_record_store
from me_portal.api.v1.views import create_record, list_page

router = APIRouter()


async def strategy_page(store: RecordStore) -> dict:
    return {
        "strategic_objectives": await store.find_many(StrategicObjective, include=("responsible_team",)),
        "teams": await store.find_many(Team),
    }


@router.get("")
async def list_strategic_objectives(
    request: Request,
    current_user: Staff = Depends(require_permission(Action.VIEW_RECORDS)),
    store: RecordStore = Depends(get_record_store),
):
    """Strategic objectives with their responsible teams, plus teams for the form"""
    return await list_page(
        request, store, current_user,
        template="strategy.html",
        page_context=strategy_page,
        json_lists={"strategicObjectives": StrategicObjectiveListItem, "teams": TeamResponse},
    )


@router.post("")
async def create_strategic_objective(
    request: Request,
    current_user: Staff = Depends(require_permission(Action.CREATE_STRATEGIC_OBJECTIVE)),
    store: RecordStore = Depends(get_record_store),
):
    return await create_record(
        request, store, current_user,
        schema=StrategicObjectiveCreate,
        model=StrategicObjective,
        response_schema=StrategicObjectiveResponse,
        template="strategy.html",
        page_context=strategy_page,
        redirect_to="/strategy",
    )
