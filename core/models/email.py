# =============================================================================
# core/models/email.py - Outbound Email Schemas
# =============================================================================
# Provider-neutral description of one transactional email.
# lib/email_client.py translates these into the provider's wire format.
# =============================================================================

from typing import Literal

from pydantic import BaseModel, Field


class EmailAddress(BaseModel):
    """An address with an optional display name."""
    email: str = Field(..., min_length=1)
    name: str | None = None


class EmailMessage(BaseModel):
    """
    One message to send.

    Example:
        EmailMessage(
            to=EmailAddress(email="admin@example.com"),
            sender=EmailAddress(email="bot@example.com", name="Application Bot"),
            subject="New Application: Ann Lee - Builder",
            content="<p>...</p>",
            reply_to=EmailAddress(email="ann@example.com"),
        )
    """
    to: EmailAddress
    sender: EmailAddress
    subject: str
    content: str
    content_type: Literal["text/html", "text/plain"] = "text/html"
    reply_to: EmailAddress | None = None
