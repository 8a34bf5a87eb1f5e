from fastapi import Depends, Request
from typing import Callable, Optional

from me_portal.core.exceptions import CredentialError, ForbiddenError, UnauthenticatedError
from me_portal.core.logging_config import logger, set_user_id
from me_portal.core.security import verify_dummy_password, verify_password
from me_portal.models.staff import Staff
from me_portal.modules.auth.permissions import Action, is_authorized
from me_portal.modules.auth.session import get_session_user_id, require_user_id, requested_path
from me_portal.services.record_store import RecordStore, get_record_store


async def get_current_user(
    request: Request,
    store: RecordStore = Depends(get_record_store)
) -> Staff:
    """Resolve the signed-in staff member or send the caller to the login page"""
    user_id = require_user_id(request)

    # Store failures propagate as UpstreamError; the session itself is fine
    user = await store.find_unique(Staff, id=user_id)
    if user is None:
        logger.log_auth_event("session", success=False, reason=f"staff {user_id} no longer exists")
        raise UnauthenticatedError(redirect_to=requested_path(request), clear_session=True)

    set_user_id(str(user.id))
    return user


async def get_optional_user(
    request: Request,
    store: RecordStore = Depends(get_record_store)
) -> Optional[Staff]:
    """Get current user if a valid session exists, None otherwise"""
    user_id = get_session_user_id(request)
    if user_id is None:
        return None

    user = await store.find_unique(Staff, id=user_id)
    if user is not None:
        set_user_id(str(user.id))
    return user


def require_permission(action: Action) -> Callable:
    """Dependency factory: the current user, provided they may perform action"""

    async def checker(current_user: Staff = Depends(get_current_user)) -> Staff:
        if not is_authorized(current_user, action):
            logger.log_authorization_denied(current_user.id, action.value)
            raise ForbiddenError()
        return current_user

    return checker


async def authenticate(store: RecordStore, email: str, password: str) -> Staff:
    """
    Check credentials and return the matching staff member.

    An unknown email still pays for one bcrypt check, and both failures
    raise the same CredentialError, so callers cannot tell them apart.
    """
    user = await store.find_unique(Staff, email=email)

    if user is None:
        verify_dummy_password(password)
        logger.log_auth_event("login", success=False, user_email=email, reason="unknown email")
        raise CredentialError()

    if not verify_password(password, user.password):
        logger.log_auth_event("login", success=False, user_email=email, reason="wrong password")
        raise CredentialError()

    logger.log_auth_event("login", success=True, user_email=email, staff_id=str(user.id))
    return user
