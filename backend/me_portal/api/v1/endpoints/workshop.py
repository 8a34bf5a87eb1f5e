from fastapi import APIRouter, Depends, Request

from me_portal.models import Project, Staff, Workshop
from me_portal.modules.auth import Action, require_permission
from me_portal.schemas.project import ProjectResponse
from me_portal.schemas.workshop import WorkshopCreate, WorkshopListItem, WorkshopResponse
from me_portal.services.record_store import RecordStore, get_record_store
from me_portal.api.v1.views import create_record, list_page

router = APIRouter()


async def workshop_page(store: RecordStore) -> dict:
    return {
        "workshops": await store.find_many(Workshop, include=("project",)),
        "projects": await store.find_many(Project),
    }


@router.get("")
async def list_workshops(
    request: Request,
    current_user: Staff = Depends(require_permission(Action.VIEW_RECORDS)),
    store: RecordStore = Depends(get_record_store),
):
    return await list_page(
        request, store, current_user,
        template="workshop.html",
        page_context=workshop_page,
        json_lists={"workshops": WorkshopListItem, "projects": ProjectResponse},
    )


@router.post("")
async def create_workshop(
    request: Request,
    current_user: Staff = Depends(require_permission(Action.CREATE_WORKSHOP)),
    store: RecordStore = Depends(get_record_store),
):
    return await create_record(
        request, store, current_user,
        schema=WorkshopCreate,
        model=Workshop,
        response_schema=WorkshopResponse,
        template="workshop.html",
        page_context=workshop_page,
        redirect_to="/workshop",
    )
