# =============================================================================
# core/services/application_service.py - Application Intake
# =============================================================================
# Handles one application submission from start to finish:
#
#   validate -> stamp id/time -> admin notification -> applicant confirmation
#
# The confirmation is only attempted after the admin notification succeeds.
# A failed confirmation is reported as a warning only.
# Each email is attempted exactly once.
# =============================================================================

import logging
from typing import Any

from pydantic import ValidationError

from app.config import Settings
from app.exceptions import AdminNotificationError, MalformedBodyError, MissingFieldsError
from core.models.application import (
    Application,
    ApplicationResponse,
    ApplicationSubmission,
    missing_fields,
)
from core.services.email_renderer import EmailRenderer
from core.services.identifiers import format_submitted_at, generate_application_id
from lib.email_client import EmailClient, EmailDeliveryError

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Application submitted successfully"
PARTIAL_SUCCESS_MESSAGE = "Application submitted successfully, but the confirmation email could not be sent"
CONFIRMATION_WARNING = (
    "We received your application but could not send the confirmation email. "
    "Please keep your application ID for reference."
)


class ApplicationService:
    """
    Service for application intake.

    Holds no per-request state: the email client and settings are shared,
    everything else lives inside `submit()`.

    Example:
        service = ApplicationService(email_client=client, settings=settings)
        result = await service.submit({"fullName": "Ann Lee", ...})
        result.application_id  # "HSMP-1760899200000-3FA2C1D4"
    """

    def __init__(self, email_client: EmailClient, settings: Settings):
        self.email_client = email_client
        self.settings = settings
        self.renderer = EmailRenderer(settings)

    def build_application(self, payload: dict[str, Any]) -> Application:
        """
        Validate a raw payload and stamp it with an id and timestamp.

        Raises:
            MissingFieldsError: If any required field is absent or blank
            MalformedBodyError: If a present field still fails validation
                (e.g. a string holding a lone surrogate)
        """
        missing = missing_fields(payload)
        if missing:
            logger.info(f"Rejected application with missing fields: {', '.join(missing)}")
            raise MissingFieldsError(missing)

        try:
            submission = ApplicationSubmission.model_validate(payload)
        except ValidationError as e:
            fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
            logger.info(f"Rejected application with invalid fields: {', '.join(fields)}")
            raise MalformedBodyError(f"Invalid value for: {', '.join(fields)}") from e

        return Application(
            submission=submission,
            application_id=generate_application_id(self.settings.APPLICATION_ID_PREFIX),
            submitted_at=format_submitted_at(tz_name=self.settings.DISPLAY_TIMEZONE),
        )

    async def submit(self, payload: dict[str, Any]) -> ApplicationResponse:
        """
        Process one submission.

        Args:
            payload: Parsed request body (JSON object or form fields)

        Returns:
            ApplicationResponse, with `warning` set if only the
            confirmation email failed

        Raises:
            MissingFieldsError, MalformedBodyError: Before any email is sent
            AdminNotificationError: If the admin notification fails
                (the confirmation is then never attempted)
        """
        application = self.build_application(payload)
        sub = application.submission

        try:
            await self.email_client.send(self.renderer.admin_notification(application))
        except EmailDeliveryError as e:
            logger.error(f"Admin notification failed for {application.application_id}: {e}")
            raise AdminNotificationError(application.application_id, str(e)) from e

        warning = None
        try:
            await self.email_client.send(self.renderer.applicant_confirmation(application))
        except EmailDeliveryError as e:
            logger.warning(f"Confirmation email failed for {application.application_id}: {e}")
            warning = CONFIRMATION_WARNING

        logger.info(f"Application received: {application.application_id} - {sub.full_name} - {sub.position}")

        return ApplicationResponse(
            message=PARTIAL_SUCCESS_MESSAGE if warning else SUCCESS_MESSAGE,
            application_id=application.application_id,
            timestamp=application.submitted_at,
            warning=warning,
        )
