"""
Custom Exceptions for the M&E Portal
====================================

Every failure a route can produce maps to one of these. The exception
handlers registered in ``me_portal.main`` turn them into responses, so
route code raises and never builds error payloads by hand.

Usage:
    from me_portal.core.exceptions import ForbiddenError, UpstreamError

    if not is_authorized(user, action):
        raise ForbiddenError()

    try:
        await session.commit()
    except SQLAlchemyError as e:
        raise UpstreamError("create Team") from e
"""

from typing import Optional, Any, Dict, List
from urllib.parse import urlencode


class PortalError(Exception):
    """Base exception for all portal errors"""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details
        }

    def payload(self) -> Dict[str, Any]:
        """Body sent to JSON clients"""
        return {"error": self.message}


# ============================================
# Validation Errors (400-type)
# ============================================

class SchemaValidationError(PortalError):
    """Submitted form data failed schema validation"""

    status_code = 400

    def __init__(self, errors: List[Dict[str, Any]]):
        super().__init__(
            f"{len(errors)} field(s) failed validation",
            code="VALIDATION_ERROR",
            details={"errors": errors}
        )
        self.errors = errors

    def payload(self) -> Dict[str, Any]:
        return {"errors": self.errors}


class InvalidFormSubmissionError(PortalError):
    """Form is missing fields the handler cannot work without"""

    status_code = 400

    def __init__(self, message: str = "Invalid form submission"):
        super().__init__(message, code="INVALID_FORM")


# ============================================
# Authentication & Authorization Errors
# ============================================

class UnauthenticatedError(PortalError):
    """No valid session; the caller is sent to the login page"""

    status_code = 302

    def __init__(self, redirect_to: str = "/", clear_session: bool = False):
        super().__init__("Authentication required", code="UNAUTHENTICATED")
        self.redirect_to = redirect_to
        self.clear_session = clear_session
        self.details = {"redirect_to": redirect_to}

    @property
    def login_url(self) -> str:
        return f"/login?{urlencode({'redirectTo': self.redirect_to})}"


class ForbiddenError(PortalError):
    """Authenticated user lacks the role for this action"""

    status_code = 403

    def __init__(self, message: str = "Not authorized"):
        super().__init__(message, code="NOT_AUTHORIZED")


class CredentialError(PortalError):
    """Login failed. Deliberately identical for unknown email and wrong password"""

    status_code = 400

    def __init__(self):
        super().__init__("Invalid email or password", code="INVALID_CREDENTIALS")


# ============================================
# Upstream Errors (500-type)
# ============================================

GENERIC_ERROR_MESSAGE = "An unexpected error occurred"


class UpstreamError(PortalError):
    """Record store unreachable or failed mid-operation"""

    status_code = 500

    def __init__(self, operation: str):
        super().__init__(GENERIC_ERROR_MESSAGE, code="UPSTREAM_FAILURE")
        self.details = {"operation": operation}
        self.operation = operation


def error_response(error: PortalError) -> Dict[str, Any]:
    """Convert exception to the JSON body sent to API clients"""
    return error.payload()
