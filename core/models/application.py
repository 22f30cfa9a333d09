# =============================================================================
# core/models/application.py - Application Schemas
# =============================================================================
# These models define the API contract for application submissions:
# - ApplicationSubmission: Input from the website form (JSON or URL-encoded)
# - Application: A submission stamped with its id and submission time
# - ApplicationResponse: Success body returned to the form
#
# An application is never persisted. It lives for exactly one request.
# =============================================================================

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Field names as the website form sends them
REQUIRED_FIELDS: tuple[str, ...] = (
    "fullName",
    "discord",
    "email",
    "position",
    "experience",
    "why",
    "availability",
    "timezone",
)

PORTFOLIO_PLACEHOLDER = "Not provided"

NEXT_STEPS = (
    "You will receive a confirmation email shortly. "
    "We will contact you via Discord within 3-5 business days."
)


def coerce_field(value: Any) -> str:
    """
    Coerce a raw form value to a trimmed string.

    Numbers become their string form (availability is often sent as 10).
    None and booleans become "" so they count as missing.
    """
    if value is None or isinstance(value, bool):
        return ""
    if isinstance(value, (list, tuple)):
        # Repeated form keys: keep the last non-empty value
        for item in reversed(value):
            text = coerce_field(item)
            if text:
                return text
        return ""
    if isinstance(value, dict):
        return ""
    return str(value).strip()


def missing_fields(payload: dict[str, Any]) -> list[str]:
    """
    Return the required fields that are absent or blank in a raw payload.

    Order follows REQUIRED_FIELDS so error messages are stable.
    """
    return [name for name in REQUIRED_FIELDS if not coerce_field(payload.get(name))]


class ApplicationSubmission(BaseModel):
    """
    Schema for one submitted application.

    Every value is coerced to a trimmed string. Validation of presence is
    done with `missing_fields()` first so that the client gets the list of
    every blank field, not only the first one pydantic trips on.

    Example:
        {
            "fullName": "Ann Lee",
            "discord": "ann#1234",
            "email": "ann@example.com",
            "position": "Builder",
            "experience": "3 years",
            "why": "Love the project",
            "availability": "10",
            "timezone": "UTC"
        }
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    full_name: str = Field(..., alias="fullName", min_length=1)
    discord: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    position: str = Field(..., min_length=1)
    experience: str = Field(..., min_length=1)
    why: str = Field(..., min_length=1, description="Motivation for applying")
    availability: str = Field(..., min_length=1, description="Hours per week")
    timezone: str = Field(..., min_length=1)
    portfolio: str = Field(default=PORTFOLIO_PLACEHOLDER)

    @field_validator(
        "full_name", "discord", "email", "position",
        "experience", "why", "availability", "timezone",
        mode="before",
    )
    @classmethod
    def _coerce_required(cls, value: Any) -> str:
        return coerce_field(value)

    @field_validator("portfolio", mode="before")
    @classmethod
    def _coerce_portfolio(cls, value: Any) -> str:
        return coerce_field(value) or PORTFOLIO_PLACEHOLDER


class Application(BaseModel):
    """A validated submission with its generated identity."""

    submission: ApplicationSubmission
    application_id: str
    submitted_at: str


class ApplicationResponse(BaseModel):
    """
    Success body for POST /api/apply.

    `warning` is only present when the confirmation email failed.
    """

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str
    application_id: str = Field(..., alias="applicationId")
    timestamp: str
    next_steps: str = Field(default=NEXT_STEPS, alias="nextSteps")
    warning: str | None = None

    def to_response(self) -> dict[str, Any]:
        """Serialize with camelCase keys, dropping an empty warning."""
        return self.model_dump(by_alias=True, exclude_none=True)
