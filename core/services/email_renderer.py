# =============================================================================
# core/services/email_renderer.py - Email Content
# =============================================================================
# Builds the two emails sent for every accepted application:
# - admin notification: every submitted field, reply-to set to the applicant
# - applicant confirmation: summary, next steps, Discord follow-up
#
# Bodies live in ./templates. EMAIL_FORMAT picks the .html or .txt variant.
# HTML templates are autoescaped, text templates are not.
# =============================================================================

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from app.config import Settings
from core.models.application import Application
from core.models.email import EmailAddress, EmailMessage

TEMPLATES_DIR = Path(__file__).parent / "templates"

BRAND_GRADIENT = "linear-gradient(135deg, #9b59b6 0%, #e84393 100%)"
DISCORD_BUTTON = (
    "display: inline-block; background: #7289da; color: white; padding: 10px 20px; "
    "text-decoration: none; border-radius: 5px; font-weight: bold;"
)

env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html", "xml"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


class EmailRenderer:
    """
    Renders admin notifications and applicant confirmations.

    Sender identities, branding and format come from Settings so the
    renderer holds no state of its own.
    """

    def __init__(self, settings: Settings):
        self.settings = settings

    @property
    def is_html(self) -> bool:
        return self.settings.EMAIL_FORMAT == "html"

    @property
    def content_type(self) -> str:
        return "text/html" if self.is_html else "text/plain"

    def render(self, name: str, application: Application) -> str:
        """Render `<name>.html` or `<name>.txt` for one application."""
        template = env.get_template(f"{name}.{'html' if self.is_html else 'txt'}")
        return template.render(
            sub=application.submission,
            application_id=application.application_id,
            submitted_at=application.submitted_at,
            org=self.settings.ORGANIZATION_NAME,
            discord_url=self.settings.DISCORD_INVITE_URL,
            brand_gradient=BRAND_GRADIENT,
            discord_button=DISCORD_BUTTON,
        ).strip()

    def admin_notification(self, application: Application) -> EmailMessage:
        """
        Build the notification sent to ADMIN_EMAIL.

        Replies go straight to the applicant.
        """
        sub = application.submission
        return EmailMessage(
            to=EmailAddress(email=self.settings.ADMIN_EMAIL),
            sender=EmailAddress(email=self.settings.FROM_EMAIL, name=self.settings.admin_sender_name),
            subject=f"New Application: {sub.full_name} - {sub.position}",
            content=self.render("admin_notification", application),
            content_type=self.content_type,
            reply_to=EmailAddress(email=sub.email),
        )

    def applicant_confirmation(self, application: Application) -> EmailMessage:
        """Build the acknowledgement sent to the applicant."""
        return EmailMessage(
            to=EmailAddress(email=application.submission.email),
            sender=EmailAddress(email=self.settings.FROM_EMAIL, name=self.settings.confirmation_sender_name),
            subject=f"Your {self.settings.ORGANIZATION_NAME} Application Has Been Received",
            content=self.render("applicant_confirmation", application),
            content_type=self.content_type,
        )
