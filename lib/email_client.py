# =============================================================================
# lib/email_client.py - Email Delivery Client
# =============================================================================
# This module wraps the transactional email provider behind one capability:
#
#   await client.send(message)   # returns None, raises EmailDeliveryError
#
# The intake service only depends on the EmailClient protocol, so tests
# hand it a fake and production hands it a SendGridClient built once at
# startup (see app/main.py lifespan).
#
# Usage:
#   client = SendGridClient(api_key=settings.SENDGRID_API_KEY)
#   await client.send(message)
#   await client.aclose()
# =============================================================================

from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx

from core.models.email import EmailAddress, EmailMessage

# Set up logging for this module
logger = logging.getLogger(__name__)


class EmailDeliveryError(Exception):
    """
    Error sending an email through the provider.

    Raised for transport failures (status_code is None) and for any
    non-2xx provider response (status_code and the provider's body set).
    """

    def __init__(
        self,
        message: str,
        code: str = "EMAIL_DELIVERY_FAILED",
        status_code: int | None = None,
        body: Any = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = status_code
        self.body = body

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.status_code is not None:
            result += f" (HTTP {self.status_code})"
        return result


class EmailClient(Protocol):
    """Capability the intake service needs from an email provider."""

    async def send(self, message: EmailMessage) -> None:
        ...


def _address(address: EmailAddress) -> dict[str, str]:
    data = {"email": address.email}
    if address.name:
        data["name"] = address.name
    return data


def build_sendgrid_payload(message: EmailMessage) -> dict[str, Any]:
    """
    Translate an EmailMessage into a SendGrid v3 mail/send body.

    Example:
        {
            "personalizations": [{"to": [{"email": "admin@example.com"}]}],
            "from": {"email": "bot@example.com", "name": "Application Bot"},
            "reply_to": {"email": "ann@example.com"},
            "subject": "New Application: Ann Lee - Builder",
            "content": [{"type": "text/html", "value": "<div>...</div>"}]
        }
    """
    payload: dict[str, Any] = {
        "personalizations": [{"to": [_address(message.to)]}],
        "from": _address(message.sender),
        "subject": message.subject,
        "content": [{"type": message.content_type, "value": message.content}],
    }
    if message.reply_to is not None:
        payload["reply_to"] = _address(message.reply_to)
    return payload


class SendGridClient:
    """
    EmailClient backed by the SendGrid v3 REST API.

    One instance holds one httpx.AsyncClient for the life of the process.
    Each send is a single attempt: there are no retries.
    """

    endpoint_path = "/v3/mail/send"

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.sendgrid.com",
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        if not api_key:
            raise ValueError("SENDGRID_API_KEY is not configured")
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self._http = http_client or httpx.AsyncClient(timeout=timeout)

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    async def send(self, message: EmailMessage) -> None:
        """
        Send one message.

        Raises:
            EmailDeliveryError: If the request fails or SendGrid rejects it
        """
        url = f"{self.base_url}{self.endpoint_path}"

        try:
            response = await self._http.post(
                url,
                json=build_sendgrid_payload(message),
                headers=self._headers(),
            )
        except httpx.HTTPError as e:
            raise EmailDeliveryError(
                message=f"Could not reach SendGrid: {e}",
                code="EMAIL_TRANSPORT_ERROR",
            ) from e

        if response.is_success:
            logger.debug(f"SendGrid accepted '{message.subject}' for {message.to.email}")
            return

        try:
            body: Any = response.json()
        except ValueError:
            body = response.text

        logger.error(f"SendGrid error details: {body}")
        raise EmailDeliveryError(
            message=_describe_errors(body) or "SendGrid rejected the message",
            code="EMAIL_REJECTED",
            status_code=response.status_code,
            body=body,
        )

    async def aclose(self) -> None:
        await self._http.aclose()


def _describe_errors(body: Any) -> str:
    """Join SendGrid's `errors[].message` entries into one line."""
    if not isinstance(body, dict):
        return ""
    errors = body.get("errors")
    if not isinstance(errors, list):
        return ""
    messages = [e.get("message") for e in errors if isinstance(e, dict) and e.get("message")]
    return "; ".join(messages)
