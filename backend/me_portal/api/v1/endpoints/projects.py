from fastapi import APIRouter, Depends, Request

from me_portal.models import Project, Staff, StrategicObjective, Team
from me_portal.modules.auth import Action, require_permission
from me_portal.schemas.project import ProjectCreate, ProjectListItem, ProjectResponse
from me_portal.schemas.strategy import StrategicObjectiveResponse
from me_portal.schemas.team import TeamResponse
from me_portal.services.record_store import RecordStore, get_record_store
from me_portal.api.v1.views import create_record, list_page

router = APIRouter()


async def project_page(store: RecordStore) -> dict:
    return {
        "projects": await store.find_many(Project, include=("strategic_objective", "responsible_team")),
        "strategic_objectives": await store.find_many(StrategicObjective),
        "teams": await store.find_many(Team),
    }


@router.get("")
async def list_projects(
    request: Request,
    current_user: Staff = Depends(require_permission(Action.VIEW_RECORDS)),
    store: RecordStore = Depends(get_record_store),
):
    """
    Projects with their strategic objective and responsible team.

    The HTML page also carries a login form posting to /login with
    redirectTo=/project, for staff who need to switch to an ADMIN account.
    """
    return await list_page(
        request, store, current_user,
        template="project.html",
        page_context=project_page,
        json_lists={
            "projects": ProjectListItem,
            "strategicObjectives": StrategicObjectiveResponse,
            "teams": TeamResponse,
        },
    )


@router.post("")
async def create_project(
    request: Request,
    current_user: Staff = Depends(require_permission(Action.CREATE_PROJECT)),
    store: RecordStore = Depends(get_record_store),
):
    return await create_record(
        request, store, current_user,
        schema=ProjectCreate,
        model=Project,
        response_schema=ProjectResponse,
        template="project.html",
        page_context=project_page,
        redirect_to="/project",
    )
