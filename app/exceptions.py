# =============================================================================
# app/exceptions.py - Custom Exceptions & Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error response has the same envelope: {"success": false, "error": ...}
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

from app.config import Settings, get_settings

logger = logging.getLogger(__name__)


class IntakeAPIException(Exception):
    """
    Base exception for the intake API.

    All custom exceptions inherit from this class.
    `details` is only rendered when `expose_details` is true, unless the
    subclass marks them as safe for clients.
    """

    # Shown regardless of expose_details (client input errors)
    details_are_public: bool = False

    def __init__(
        self,
        message: str,
        code: str = "INTAKE_ERROR",
        status_code: int = 500,
        details: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details

    def to_dict(self, expose_details: bool = False) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result: dict[str, Any] = {
            "success": False,
            "error": self.message,
            "code": self.code,
        }
        if self.details is not None and (self.details_are_public or expose_details):
            result["details"] = self.details
        return result


# =============================================================================
# Request Exceptions
# =============================================================================

class MalformedBodyError(IntakeAPIException):
    """Raised when the request body cannot be parsed."""

    details_are_public = True

    def __init__(self, reason: str):
        super().__init__(
            message="Malformed request body",
            code="MALFORMED_BODY",
            status_code=400,
            details=reason,
        )


class UnsupportedContentTypeError(IntakeAPIException):
    """Raised when the body is neither JSON nor URL-encoded form data."""

    details_are_public = True

    def __init__(self, content_type: str, allowed: list[str]):
        super().__init__(
            message=f"Unsupported content type: {content_type or 'none'}",
            code="UNSUPPORTED_CONTENT_TYPE",
            status_code=415,
            details={"allowed": allowed},
        )


class MissingFieldsError(IntakeAPIException):
    """Raised when one or more required application fields are blank or absent."""

    details_are_public = True

    def __init__(self, missing: list[str]):
        super().__init__(
            message="Missing required fields",
            code="MISSING_FIELDS",
            status_code=400,
            details={"missingFields": missing},
        )
        self.missing = missing


# =============================================================================
# Dispatch Exceptions
# =============================================================================

class AdminNotificationError(IntakeAPIException):
    """Raised when the admin notification could not be delivered."""

    def __init__(self, application_id: str, error: str):
        super().__init__(
            message="Failed to submit application",
            code="ADMIN_NOTIFICATION_FAILED",
            status_code=500,
            details=error,
        )
        self.application_id = application_id


# =============================================================================
# Exception Handlers
# =============================================================================

def request_settings(request: Request) -> Settings:
    """
    Settings for the app serving this request.

    Honours app.dependency_overrides, so handlers see the same Settings
    the routes were given.
    """
    provider = request.app.dependency_overrides.get(get_settings, get_settings)
    return provider()


async def intake_exception_handler(
    request: Request,
    exc: IntakeAPIException
) -> JSONResponse:
    """Convert IntakeAPIException to JSON response."""
    expose = request_settings(request).expose_internal_error_details
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(expose_details=expose)
    )


async def unexpected_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle anything that escaped the routes.

    Raw error text is only included when internal details are exposed.
    """
    logger.exception(f"Unexpected error: {exc}")
    content: dict[str, Any] = {
        "success": False,
        "error": "Failed to submit application",
        "code": "INTERNAL_ERROR",
    }
    if request_settings(request).expose_internal_error_details:
        content["details"] = str(exc)
    return JSONResponse(status_code=500, content=content)
