"""
Shared request handling for the entity pages.

Each entity route is the same pipeline: resolve the user, load the lists
the page needs, and on POST validate the form and insert one record.
Browsers (Accept: text/html) get rendered pages and redirects; every
other client gets JSON.
"""
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Type

from fastapi import Request
from fastapi.responses import RedirectResponse, Response
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel
from starlette.datastructures import UploadFile

from me_portal.core.exceptions import SchemaValidationError
from me_portal.models import AGE_GROUP_LABELS, AgeGroup, DisaggregatedSex, ProgressStatus, Staff
from me_portal.modules.auth.permissions import Action, is_authorized
from me_portal.schemas.auth import StaffResponse
from me_portal.schemas.common import ResponseSchema
from me_portal.schemas.validation import group_errors_by_field, validate_form
from me_portal.services.record_store import RecordStore

TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

# make choices and permission checks available in templates
templates.env.globals.update(
    can=is_authorized,
    Action=Action,
    status_options=[(status.value, status.value.replace("_", " ").title()) for status in ProgressStatus],
    sex_options=[(sex.value, sex.value.title()) for sex in DisaggregatedSex],
    age_groups=[(group.value, AGE_GROUP_LABELS[group]) for group in AgeGroup],
)


def record_options(records: List[Any], label: str = "name") -> List[tuple]:
    """(id, label) pairs for a select input"""
    return [(str(record.id), getattr(record, label)) for record in records]


templates.env.globals["record_options"] = record_options

PageContext = Callable[[RecordStore], Awaitable[Dict[str, Any]]]


def wants_html(request: Request) -> bool:
    return "text/html" in request.headers.get("accept", "")


def render(request: Request, template: str, context: Dict[str, Any], status_code: int = 200) -> Response:
    return templates.TemplateResponse(request, template, context, status_code=status_code)


def user_json(user: Staff) -> Dict[str, Any]:
    return StaffResponse.model_validate(user).to_json()


def serialize(schema: Type[ResponseSchema], records: List[Any]) -> List[Dict[str, Any]]:
    return [schema.model_validate(record).to_json() for record in records]


async def read_form(request: Request) -> Dict[str, Any]:
    """Form body as plain strings; file parts are ignored"""
    form = await request.form()
    return {key: value for key, value in form.items() if not isinstance(value, UploadFile)}


async def list_page(
    request: Request,
    store: RecordStore,
    user: Staff,
    *,
    template: str,
    page_context: PageContext,
    json_lists: Mapping[str, Type[ResponseSchema]],
) -> Any:
    """GET handler body: the page's lists, rendered or as JSON"""
    context = await page_context(store)
    if wants_html(request):
        return render(request, template, {"user": user, "errors": {}, "values": {}, **context})

    payload = {key: serialize(schema, context[key]) for key, schema in json_lists.items()}
    payload["user"] = user_json(user)
    return payload


async def create_record(
    request: Request,
    store: RecordStore,
    user: Staff,
    *,
    schema: Type[BaseModel],
    model: type,
    response_schema: Type[ResponseSchema],
    template: str,
    page_context: PageContext,
    redirect_to: str,
) -> Any:
    """POST handler body: validate the form, insert one record, answer"""
    form = await read_form(request)
    try:
        data = validate_form(schema, form)
    except SchemaValidationError as e:
        if not wants_html(request):
            raise
        context = await page_context(store)
        return render(
            request,
            template,
            {"user": user, "errors": group_errors_by_field(e.errors), "values": form, **context},
            status_code=400,
        )

    record = await store.create(model, data.model_dump())
    if wants_html(request):
        return RedirectResponse(url=redirect_to, status_code=303)
    return response_schema.model_validate(record).to_json()


def safe_redirect_target(target: Optional[str], default: str = "/") -> str:
    """Only local absolute paths are followed after login"""
    if not target or not target.startswith("/") or target.startswith("//") or "\\" in target:
        return default
    return target
