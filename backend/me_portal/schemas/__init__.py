# Pydantic schemas
from me_portal.schemas.auth import LoginForm, StaffCreate, StaffResponse
from me_portal.schemas.team import TeamCreate, TeamResponse
from me_portal.schemas.strategy import (
    StrategicObjectiveCreate,
    StrategicObjectiveResponse,
    StrategicObjectiveListItem,
)
from me_portal.schemas.project import ProjectCreate, ProjectResponse, ProjectListItem
from me_portal.schemas.livelihood import LivelihoodCreate, LivelihoodResponse, LivelihoodListItem
from me_portal.schemas.workshop import WorkshopCreate, WorkshopResponse, WorkshopListItem
from me_portal.schemas.validation import (
    coerce_form_data,
    format_validation_errors,
    group_errors_by_field,
    validate_form,
)
