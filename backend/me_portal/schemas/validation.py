"""
Form validation pipeline shared by every write route.

    raw form -> coerce_form_data -> schema -> validated model
                                          or [FieldError, ...]

Errors keep schema declaration order, one per field, followed by any
cross-field errors. Views look messages up through group_errors_by_field.
"""
import re
from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError
from pydantic.fields import FieldInfo

from me_portal.core.exceptions import SchemaValidationError
from me_portal.schemas.common import RefinementError

SchemaT = TypeVar("SchemaT", bound=BaseModel)

FieldError = Dict[str, Any]  # {"path": [str, ...], "message": str}

_TRUE_VALUES = {"true", "on", "1", "yes"}
_FALSE_VALUES = {"false", "off", "0", "no"}

_NUMBER_ERRORS = {"float_parsing", "float_type", "finite_number", "int_parsing", "int_type", "int_from_float"}


# Plain ASCII numerals only; int()/float() would also take "1_000" or "inf"
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def _external_name(name: str, field: FieldInfo) -> str:
    return field.alias or name


def _coerce_value(annotation: Any, raw: Any) -> Any:
    if not isinstance(raw, str):
        return raw
    if annotation is bool:
        lowered = raw.lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        return raw
    if annotation is int:
        return int(raw) if _INT_PATTERN.fullmatch(raw) else raw
    if annotation is float:
        return float(raw) if _FLOAT_PATTERN.fullmatch(raw) else raw
    return raw


def coerce_form_data(schema: Type[BaseModel], form: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Turn raw form values into the types the schema expects.

    Blank values are dropped so the schema reports them as missing.
    Values that cannot be converted are passed through untouched and the
    schema reports the parse failure for that field.
    """
    data: Dict[str, Any] = {}
    for name, field in schema.model_fields.items():
        key = _external_name(name, field)
        if key not in form:
            continue
        raw = form[key]
        if isinstance(raw, str):
            raw = raw.strip()
            if raw == "":
                continue
        data[key] = _coerce_value(field.annotation, raw)
    return data


def _humanize(external_name: str) -> str:
    words = []
    current = ""
    for char in external_name:
        if char.isupper() and current:
            words.append(current)
            current = char.lower()
        else:
            current += char
    words.append(current)
    return " ".join(words).capitalize()


def _labels(schema: Type[BaseModel]) -> Dict[str, str]:
    return {
        _external_name(name, field): field.title or _humanize(_external_name(name, field))
        for name, field in schema.model_fields.items()
    }


def _message(error: Dict[str, Any], label: str) -> str:
    kind = error["type"]
    ctx = error.get("ctx") or {}

    if kind == "missing":
        return f"{label} is required"
    if kind == "string_too_short":
        return f"{label} is required" if ctx.get("min_length") == 1 else \
            f"{label} must be at least {ctx.get('min_length')} characters"
    if kind == "string_too_long":
        return f"{label} must be {ctx.get('max_length')} characters or less"
    if kind in _NUMBER_ERRORS:
        return f"{label} must be a whole number" if kind.startswith("int") else f"{label} must be a number"
    if kind == "greater_than":
        return f"{label} must be a positive number" if ctx.get("gt") == 0 else \
            f"{label} must be greater than {ctx.get('gt')}"
    if kind == "greater_than_equal":
        return f"{label} must be non-negative" if ctx.get("ge") == 0 else \
            f"{label} must be at least {ctx.get('ge')}"
    if kind == "enum":
        return f"{label} must be one of {ctx.get('expected')}"
    if kind in ("bool_parsing", "bool_type"):
        return f"{label} must be true or false"
    if kind == "value_error" and ctx.get("error") is not None:
        return str(ctx["error"])
    return error["msg"]


def format_validation_errors(exc: ValidationError, schema: Type[BaseModel]) -> List[FieldError]:
    """Convert a pydantic ValidationError into ordered {path, message} entries"""
    labels = _labels(schema)
    errors: List[FieldError] = []
    refinements: List[FieldError] = []
    seen_fields = set()

    for error in exc.errors():
        path = [str(part) for part in error["loc"]]
        ctx = error.get("ctx") or {}
        refinement = ctx.get("error")
        if isinstance(refinement, RefinementError):
            # Cross-field rules are reported after every per-field error
            refinements.append({"path": [refinement.field], "message": str(refinement)})
            continue

        field = path[0] if path else ""
        if field:
            if field in seen_fields:
                continue
            seen_fields.add(field)

        errors.append({
            "path": path,
            "message": _message(error, labels.get(field, _humanize(field) if field else "Form")),
        })
    return errors + refinements


def validate_form(schema: Type[SchemaT], form: Mapping[str, Any]) -> SchemaT:
    """Coerce and validate a form submission, raising SchemaValidationError on failure"""
    data = coerce_form_data(schema, form)
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        raise SchemaValidationError(format_validation_errors(exc, schema)) from exc


def group_errors_by_field(errors: Optional[List[FieldError]]) -> Dict[str, str]:
    """First message per top-level field, for rendering next to form inputs"""
    grouped: Dict[str, str] = {}
    for error in errors or []:
        path = error.get("path") or []
        field = str(path[0]) if path else "__all__"
        grouped.setdefault(field, error["message"])
    return grouped
