# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Provides a recording fake email client and an API test client
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SENDGRID_API_KEY", "SG.test-key")
os.environ.setdefault("FROM_EMAIL", "bot@example.com")
os.environ.setdefault("ADMIN_EMAIL", "admin@example.com")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DISPLAY_TIMEZONE", "UTC")

import pytest
from fastapi.testclient import TestClient

from app.config import get_settings
from app.dependencies import get_email_client
from app.main import app
from core.models.email import EmailMessage
from lib.email_client import EmailDeliveryError


# =============================================================================
# Fakes
# =============================================================================

class FakeEmailClient:
    """
    In-memory EmailClient.

    Records every message it is asked to send. `fail_on` lists the 1-based
    call numbers that should raise EmailDeliveryError.
    """

    def __init__(self, fail_on: tuple[int, ...] = ()):
        self.fail_on = fail_on
        self.sent: list[EmailMessage] = []
        self.calls = 0

    async def send(self, message: EmailMessage) -> None:
        self.calls += 1
        if self.calls in self.fail_on:
            raise EmailDeliveryError(
                message="Forbidden",
                code="EMAIL_REJECTED",
                status_code=403,
                body={"errors": [{"message": "Forbidden"}]},
            )
        self.sent.append(message)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def valid_payload():
    """A complete application as the website form sends it."""
    return {
        "fullName": "Ann Lee",
        "discord": "ann#1234",
        "email": "ann@example.com",
        "position": "Builder",
        "experience": "3 years",
        "why": "Love the project",
        "availability": "10",
        "timezone": "UTC",
    }


@pytest.fixture
def settings():
    """Settings loaded from the test environment."""
    return get_settings()


@pytest.fixture
def email_client():
    """Fake client where every send succeeds."""
    return FakeEmailClient()


@pytest.fixture
def make_api_client():
    """
    Build a TestClient wired to a given fake email client.

    The lifespan is not entered, so no real SendGrid client is created.
    """
    def _make(client: FakeEmailClient, raise_server_exceptions: bool = True) -> TestClient:
        app.dependency_overrides[get_email_client] = lambda: client
        return TestClient(app, raise_server_exceptions=raise_server_exceptions)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def api_client(make_api_client, email_client):
    """TestClient with an always-succeeding fake email client."""
    return make_api_client(email_client)
