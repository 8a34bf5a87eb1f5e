from typing import Optional
from pydantic import Field

from me_portal.models.progress import ProgressStatus
from me_portal.schemas.common import (
    ActualValue,
    Name,
    PositiveId,
    ProgressInput,
    ReportDate,
    RequiredText,
    ResponseSchema,
    TargetValue,
    UtcDateTime,
)
from me_portal.schemas.strategy import StrategicObjectiveSummary
from me_portal.schemas.team import TeamSummary


class ProjectCreate(ProgressInput):
    name: Name = Field(..., title="Project name")
    objective: RequiredText
    strategic_objective_id: PositiveId = Field(..., title="Strategic objective")
    outcome: RequiredText
    activity: RequiredText
    kpi: RequiredText = Field(..., title="KPI")
    target_value: TargetValue
    actual_value: ActualValue
    status: ProgressStatus
    responsible_team_id: PositiveId = Field(..., title="Responsible team")
    timeline: RequiredText
    last_updated: ReportDate


class ProjectResponse(ResponseSchema):
    id: int
    name: str
    objective: str
    strategic_objective_id: int
    outcome: str
    activity: str
    kpi: str
    target_value: float
    actual_value: float
    progress_percentage: float
    status: ProgressStatus
    responsible_team_id: int
    timeline: str
    last_updated: UtcDateTime


class ProjectListItem(ProjectResponse):
    strategic_objective: Optional[StrategicObjectiveSummary] = None
    responsible_team: Optional[TeamSummary] = None


class ProjectSummary(ResponseSchema):
    id: Optional[int] = None
    name: Optional[str] = None
