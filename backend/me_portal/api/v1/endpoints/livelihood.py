from fastapi import APIRouter, Depends, Request

from me_portal.models import Livelihood, Project, Staff
from me_portal.modules.auth import Action, require_permission
from me_portal.schemas.livelihood import LivelihoodCreate, LivelihoodListItem, LivelihoodResponse
from me_portal.schemas.project import ProjectResponse
from me_portal.services.record_store import RecordStore, get_record_store
from me_portal.api.v1.views import create_record, list_page

router = APIRouter()


async def livelihood_page(store: RecordStore) -> dict:
    return {
        "livelihoods": await store.find_many(Livelihood, include=("project",)),
        "projects": await store.find_many(Project),
    }


@router.get("")
async def list_livelihoods(
    request: Request,
    current_user: Staff = Depends(require_permission(Action.VIEW_RECORDS)),
    store: RecordStore = Depends(get_record_store),
):
    return await list_page(
        request, store, current_user,
        template="livelihood.html",
        page_context=livelihood_page,
        json_lists={"livelihoods": LivelihoodListItem, "projects": ProjectResponse},
    )


@router.post("")
async def create_livelihood(
    request: Request,
    current_user: Staff = Depends(require_permission(Action.CREATE_LIVELIHOOD)),
    store: RecordStore = Depends(get_record_store),
):
    """Record a livelihood grant (ADMIN only)"""
    return await create_record(
        request, store, current_user,
        schema=LivelihoodCreate,
        model=Livelihood,
        response_schema=LivelihoodResponse,
        template="livelihood.html",
        page_context=livelihood_page,
        redirect_to="/livelihood",
    )
