"""Pydantic schemas for workshops"""
from typing import Optional
from pydantic import Field

from me_portal.models.livelihood import AgeGroup, DisaggregatedSex
from me_portal.schemas.common import FormSchema, PositiveId, RequiredText, ResponseSchema
from me_portal.schemas.project import ProjectSummary


class WorkshopCreate(FormSchema):
    project_id: PositiveId = Field(..., title="Project")
    num_participants: int = Field(..., ge=0, strict=True, title="Number of participants")
    disaggregated_sex: DisaggregatedSex = Field(..., title="Sex")
    disability: bool
    age_group: AgeGroup
    pre_evaluation: RequiredText
    post_evaluation: RequiredText
    local_partner: RequiredText
    local_partner_responsibility: RequiredText
    success_of_partnership: RequiredText
    challenges: RequiredText
    strengths: RequiredText
    outcomes: RequiredText
    recommendations: RequiredText


class WorkshopResponse(ResponseSchema):
    id: int
    project_id: int
    num_participants: int
    disaggregated_sex: DisaggregatedSex
    disability: bool
    age_group: AgeGroup
    pre_evaluation: str
    post_evaluation: str
    local_partner: str
    local_partner_responsibility: str
    success_of_partnership: str
    challenges: str
    strengths: str
    outcomes: str
    recommendations: str


class WorkshopListItem(WorkshopResponse):
    project: Optional[ProjectSummary] = None
