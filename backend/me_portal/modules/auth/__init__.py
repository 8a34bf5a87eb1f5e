# Authentication module

from me_portal.modules.auth.dependencies import (
    authenticate,
    get_current_user,
    get_optional_user,
    require_permission,
)
from me_portal.modules.auth.permissions import Action, is_authorized
from me_portal.modules.auth.session import (
    create_session,
    destroy_session,
    get_session_user_id,
    logout_response,
    require_user_id,
)

__all__ = [
    # Dependencies
    "authenticate",
    "get_current_user",
    "get_optional_user",
    "require_permission",
    # Permissions
    "Action",
    "is_authorized",
    # Session cookie
    "create_session",
    "destroy_session",
    "get_session_user_id",
    "logout_response",
    "require_user_id",
]
