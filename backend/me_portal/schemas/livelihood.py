"""Pydantic schemas for livelihood grants"""
from typing import Optional
from pydantic import Field

from me_portal.models.livelihood import AgeGroup, DisaggregatedSex
from me_portal.schemas.common import FormSchema, PositiveId, RequiredText, ResponseSchema
from me_portal.schemas.project import ProjectSummary


class LivelihoodCreate(FormSchema):
    """Record a grant paid to a participant"""
    project_id: PositiveId = Field(..., title="Project")
    participant_name: RequiredText
    location: RequiredText
    disaggregated_sex: DisaggregatedSex = Field(..., title="Sex")
    disability: bool
    age_group: AgeGroup
    grant_amount_received: float = Field(..., gt=0, allow_inf_nan=False, strict=True, title="Grant amount")
    purpose: RequiredText = Field(..., title="Grant purpose")
    progress1: RequiredText = Field(..., title="Progress 1")
    progress2: RequiredText = Field(..., title="Progress 2")
    outcome: RequiredText
    subsequent_grant_amount: float = Field(..., ge=0, allow_inf_nan=False, strict=True)


class LivelihoodResponse(ResponseSchema):
    id: int
    project_id: int
    participant_name: str
    location: str
    disaggregated_sex: DisaggregatedSex
    disability: bool
    age_group: AgeGroup
    grant_amount_received: float
    purpose: str
    progress1: str
    progress2: str
    outcome: str
    subsequent_grant_amount: float


class LivelihoodListItem(LivelihoodResponse):
    project: Optional[ProjectSummary] = None
