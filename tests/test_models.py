# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the application models and settings:
# - Values are coerced to trimmed strings
# - Blank values count as missing
# - Settings refuse to load without the provider credential
#
# Run with: pytest tests/test_models.py -v
# =============================================================================

import pytest
from pydantic import ValidationError

from app.config import Settings
from core.models import (
    PORTFOLIO_PLACEHOLDER,
    ApplicationResponse,
    ApplicationSubmission,
    coerce_field,
    missing_fields,
)


# =============================================================================
# Field Coercion
# =============================================================================

class TestCoerceField:

    @pytest.mark.parametrize("raw, expected", [
        ("  Ann  ", "Ann"),
        (10, "10"),
        (7.5, "7.5"),
        (None, ""),
        (True, ""),
        ({"nested": 1}, ""),
        (["", "last"], "last"),
    ])
    def test_coercion(self, raw, expected):
        assert coerce_field(raw) == expected


class TestMissingFields:

    def test_complete_payload(self, valid_payload):
        assert missing_fields(valid_payload) == []

    def test_empty_payload(self):
        assert len(missing_fields({})) == 8

    def test_zero_availability_is_present(self, valid_payload):
        valid_payload["availability"] = 0

        assert missing_fields(valid_payload) == []


# =============================================================================
# ApplicationSubmission
# =============================================================================

class TestApplicationSubmission:

    def test_aliases(self, valid_payload):
        submission = ApplicationSubmission.model_validate(valid_payload)

        assert submission.full_name == "Ann Lee"
        assert submission.availability == "10"

    def test_blank_portfolio_uses_placeholder(self, valid_payload):
        valid_payload["portfolio"] = "   "

        submission = ApplicationSubmission.model_validate(valid_payload)

        assert submission.portfolio == PORTFOLIO_PLACEHOLDER

    def test_blank_required_rejected(self, valid_payload):
        valid_payload["email"] = " "

        with pytest.raises(ValidationError):
            ApplicationSubmission.model_validate(valid_payload)

    def test_unknown_fields_ignored(self, valid_payload):
        valid_payload["honeypot"] = "x"

        submission = ApplicationSubmission.model_validate(valid_payload)

        assert not hasattr(submission, "honeypot")


class TestApplicationResponse:

    def test_warning_omitted_when_none(self):
        response = ApplicationResponse(message="ok", application_id="HSMP-1", timestamp="now")

        assert "warning" not in response.to_response()

    def test_camel_case_keys(self):
        response = ApplicationResponse(message="ok", application_id="HSMP-1", timestamp="now", warning="w")

        body = response.to_response()

        assert body["applicationId"] == "HSMP-1"
        assert body["warning"] == "w"


# =============================================================================
# Settings
# =============================================================================

class TestSettings:

    def test_missing_api_key_fails_fast(self, monkeypatch):
        monkeypatch.delenv("SENDGRID_API_KEY", raising=False)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_invalid_timezone_rejected(self, monkeypatch):
        monkeypatch.setenv("DISPLAY_TIMEZONE", "Mars/Olympus")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_error_detail_exposure_defaults(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        assert Settings(_env_file=None).expose_internal_error_details is False

        monkeypatch.setenv("ENVIRONMENT", "development")
        assert Settings(_env_file=None).expose_internal_error_details is True

    def test_error_detail_exposure_explicit(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("EXPOSE_INTERNAL_ERROR_DETAILS", "true")

        assert Settings(_env_file=None).expose_internal_error_details is True

    def test_default_sender_names(self):
        settings = Settings(_env_file=None)

        assert settings.admin_sender_name == "Hamlet SMP Application Bot"
        assert settings.confirmation_sender_name == "Hamlet SMP Team"
