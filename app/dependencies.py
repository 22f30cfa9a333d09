# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# The email client is built once in the app lifespan and stored on
# app.state; tests replace it with app.dependency_overrides.
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from app.config import Settings, get_settings
from core.services.application_service import ApplicationService
from lib.email_client import EmailClient


def get_email_client(request: Request) -> EmailClient:
    """
    Get the process-wide email client.

    Returns the client created at startup.
    """
    return request.app.state.email_client


def get_application_service(
    email_client: Annotated[EmailClient, Depends(get_email_client)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> ApplicationService:
    """Build the intake service around the shared client and settings."""
    return ApplicationService(email_client=email_client, settings=settings)


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_settings)]
ApplicationServiceDep = Annotated[ApplicationService, Depends(get_application_service)]
