# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .application_service import ApplicationService
from .email_renderer import EmailRenderer
from .identifiers import format_submitted_at, generate_application_id

__all__ = [
    "ApplicationService",
    "EmailRenderer",
    "format_submitted_at",
    "generate_application_id",
]
