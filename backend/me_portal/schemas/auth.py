from pydantic import BaseModel, EmailStr, Field, ConfigDict
from pydantic.alias_generators import to_camel

from me_portal.models.staff import StaffRole
from me_portal.schemas.common import ResponseSchema


class LoginForm(BaseModel):
    """Login form fields. Email format is not checked so bad input reads like bad credentials."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    redirect_to: str = "/"


class StaffCreate(BaseModel):
    """New staff account (seed script and fixtures)"""
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=8)
    role: StaffRole = StaffRole.STAFF


class StaffResponse(ResponseSchema):
    """Staff member as exposed to views; never includes the password hash"""
    id: int
    name: str
    email: str
    role: StaffRole
