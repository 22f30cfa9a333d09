# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - application.py: Application submission and response schemas
# - email.py: Provider-neutral outbound email schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

from .application import (
    NEXT_STEPS,
    PORTFOLIO_PLACEHOLDER,
    REQUIRED_FIELDS,
    Application,
    ApplicationResponse,
    ApplicationSubmission,
    coerce_field,
    missing_fields,
)
from .email import EmailAddress, EmailMessage

__all__ = [
    # Application
    "NEXT_STEPS",
    "PORTFOLIO_PLACEHOLDER",
    "REQUIRED_FIELDS",
    "Application",
    "ApplicationResponse",
    "ApplicationSubmission",
    "coerce_field",
    "missing_fields",
    # Email
    "EmailAddress",
    "EmailMessage",
]
