# =============================================================================
# lib/ - External Collaborator Wrappers
# =============================================================================
# This package contains clients for services outside this process:
# - email_client.py: Email delivery capability and its SendGrid implementation
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.email_client import (
    EmailClient,
    EmailDeliveryError,
    SendGridClient,
    build_sendgrid_payload,
)

__all__ = [
    "EmailClient",
    "EmailDeliveryError",
    "SendGridClient",
    "build_sendgrid_payload",
]
