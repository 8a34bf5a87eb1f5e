"""Pydantic schemas for strategic objectives"""
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
from me_portal.schemas.team import TeamSummary


class StrategicObjectiveCreate(ProgressInput):
    """Create a strategic objective. Fields are validated in declaration order."""
    name: Name = Field(..., title="Strategic objective name")
    outcome: RequiredText
    kpi: RequiredText = Field(..., title="KPI")
    target_value: TargetValue
    actual_value: ActualValue
    status: ProgressStatus
    team_id: PositiveId = Field(..., title="Team")
    last_updated: ReportDate


class StrategicObjectiveResponse(ResponseSchema):
    """Strategic objective as stored, plus derived progress"""
    id: int
    name: str
    outcome: str
    kpi: str
    target_value: float
    actual_value: float
    progress_percentage: float
    status: ProgressStatus
    team_id: int
    last_updated: UtcDateTime


class StrategicObjectiveListItem(StrategicObjectiveResponse):
    """Strategic objective with its responsible team loaded"""
    responsible_team: Optional[TeamSummary] = None


class StrategicObjectiveSummary(ResponseSchema):
    id: Optional[int] = None
    name: Optional[str] = None
