from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import RedirectResponse
from pydantic import ValidationError
from typing import Optional

from me_portal.core.exceptions import CredentialError, InvalidFormSubmissionError
from me_portal.core.rate_limiter import login_rate_limit
from me_portal.models import Staff
from me_portal.modules.auth import (
    Action,
    authenticate,
    create_session,
    get_optional_user,
    logout_response,
    require_permission,
)
from me_portal.schemas.auth import LoginForm
from me_portal.services.record_store import RecordStore, get_record_store
from me_portal.api.v1.views import read_form, render, safe_redirect_target, user_json, wants_html

router = APIRouter()

SECTIONS = [
    ("/team", "Teams"),
    ("/strategy", "Strategic objectives"),
    ("/project", "Projects"),
    ("/livelihood", "Livelihoods"),
    ("/workshop", "Workshops"),
]


@router.get("/login")
async def login_page(
    request: Request,
    redirect_to: str = Query("/", alias="redirectTo"),
    current_user: Optional[Staff] = Depends(get_optional_user),
):
    """Login form; carries the page the visitor was sent away from"""
    redirect_to = safe_redirect_target(redirect_to)
    if not wants_html(request):
        return {
            "redirectTo": redirect_to,
            "user": user_json(current_user) if current_user else None,
        }
    return render(request, "login.html", {"user": current_user, "redirect_to": redirect_to, "error": None})


@router.post("/login")
@login_rate_limit()
async def login(
    request: Request,
    store: RecordStore = Depends(get_record_store),
):
    """
    Sign in with email and password.

    Success sets the session cookie and redirects to redirectTo (local
    paths only). Unknown email and wrong password fail identically.
    """
    form = await read_form(request)
    try:
        credentials = LoginForm.model_validate(form)
    except ValidationError:
        raise InvalidFormSubmissionError() from None

    redirect_to = safe_redirect_target(credentials.redirect_to)
    try:
        user = await authenticate(store, credentials.email, credentials.password)
    except CredentialError as e:
        if not wants_html(request):
            raise
        return render(
            request,
            "login.html",
            {"user": None, "redirect_to": redirect_to, "error": e.message, "email": credentials.email},
            status_code=e.status_code,
        )

    response = RedirectResponse(url=redirect_to, status_code=302)
    return create_session(response, user.id)


@router.post("/logout")
async def logout():
    """Clear the session cookie and go back to the login page"""
    return logout_response()


@router.get("/")
async def home(
    request: Request,
    current_user: Staff = Depends(require_permission(Action.VIEW_RECORDS)),
):
    if wants_html(request):
        return render(request, "home.html", {"user": current_user, "sections": SECTIONS})
    return {
        "sections": [{"path": path, "title": title} for path, title in SECTIONS],
        "user": user_json(current_user),
    }
