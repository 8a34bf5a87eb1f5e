"""Pydantic schemas for teams"""
from typing import Optional
from pydantic import Field

from me_portal.schemas.common import FormSchema, Name, ResponseSchema


class TeamCreate(FormSchema):
    """Create a new team"""
    name: Name = Field(..., title="Team name")


class TeamResponse(ResponseSchema):
    """Team details response"""
    id: int
    name: str


class TeamSummary(ResponseSchema):
    """Team as embedded in other records"""
    id: Optional[int] = None
    name: Optional[str] = None
