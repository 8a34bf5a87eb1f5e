"""Building blocks shared by the entity schemas"""
from datetime import datetime, timezone
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel


class RefinementError(ValueError):
    """Cross-field rule failure that belongs to one named field"""

    def __init__(self, message: str, field: str):
        super().__init__(message)
        self.field = field


class FormSchema(BaseModel):
    """Input schema fed from form posts; external names are camelCase"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
    )


class ResponseSchema(BaseModel):
    """Output schema read off ORM objects and dumped with camelCase keys"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


def _parse_report_date(value: Any) -> Any:
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip())
        except ValueError:
            raise ValueError("Last updated must be a valid date")
    return value


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes for timezone-aware columns
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _not_in_future(value: datetime) -> datetime:
    value = _as_utc(value)
    if value > datetime.now(timezone.utc):
        raise ValueError("Last updated date cannot be in the future")
    return value


RequiredText = Annotated[str, Field(min_length=1)]
Name = Annotated[str, Field(min_length=1, max_length=100)]
PositiveId = Annotated[int, Field(gt=0, strict=True)]
TargetValue = Annotated[float, Field(gt=0, allow_inf_nan=False, strict=True)]
ActualValue = Annotated[float, Field(ge=0, allow_inf_nan=False, strict=True)]
ReportDate = Annotated[datetime, BeforeValidator(_parse_report_date), AfterValidator(_not_in_future)]
UtcDateTime = Annotated[datetime, AfterValidator(_as_utc)]


class ProgressInput(FormSchema):
    """
    Adds the actual <= target rule to schemas with both values.

    The rule runs once both numbers pass their own checks, whatever happens
    to the other fields. Subclasses declare target_value before actual_value.
    """

    @field_validator("actual_value", check_fields=False)
    @classmethod
    def _actual_within_target(cls, value: float, info: ValidationInfo) -> float:
        target = info.data.get("target_value")
        if target is not None and value > target:
            raise RefinementError(
                "Actual value cannot be greater than target value",
                field="actualValue",
            )
        return value
