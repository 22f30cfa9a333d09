# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.ADMIN_EMAIL)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# The provider credential and both email addresses are required: the process
# refuses to start without them.
# =============================================================================

from functools import lru_cache
from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings are accessed via the global `settings` instance, or through
    `get_settings()` when injected as a FastAPI dependency.
    """

    # -------------------------------------------------------------------------
    # Email Provider (SendGrid)
    # -------------------------------------------------------------------------
    # These are required - app won't start without them

    SENDGRID_API_KEY: str = Field(
        ...,
        min_length=1,
        description="SendGrid API key (sent as a bearer token)"
    )

    FROM_EMAIL: str = Field(
        ...,
        min_length=3,
        description="Sender address for the admin notification and the confirmation"
    )

    ADMIN_EMAIL: str = Field(
        ...,
        min_length=3,
        description="Recipient of new application notifications"
    )

    SENDGRID_API_BASE: str = Field(
        default="https://api.sendgrid.com",
        description="Base URL of the SendGrid v3 API"
    )

    EMAIL_TIMEOUT_SECONDS: float = Field(
        default=30.0,
        gt=0,
        description="Transport timeout for a single send call"
    )

    # -------------------------------------------------------------------------
    # Branding & Templates
    # -------------------------------------------------------------------------

    ORGANIZATION_NAME: str = Field(
        default="Hamlet SMP",
        description="Shown in subjects, sender names and email bodies"
    )

    ADMIN_SENDER_NAME: str | None = Field(
        default=None,
        description="Display name on the admin notification (default: '<org> Application Bot')"
    )

    CONFIRMATION_SENDER_NAME: str | None = Field(
        default=None,
        description="Display name on the applicant confirmation (default: '<org> Team')"
    )

    DISCORD_INVITE_URL: str = Field(
        default="https://discord.gg/kmKnDs6WUF",
        description="Discord invite embedded in both emails"
    )

    EMAIL_FORMAT: Literal["html", "text"] = Field(
        default="html",
        description="Render emails as HTML or plain text"
    )

    # -------------------------------------------------------------------------
    # Application Identity
    # -------------------------------------------------------------------------

    APPLICATION_ID_PREFIX: str = Field(
        default="HSMP-",
        description="Prefix of every generated application id"
    )

    DISPLAY_TIMEZONE: str = Field(
        default="UTC",
        description="IANA timezone used for the submission timestamp shown to people"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)"
    )

    EXPOSE_INTERNAL_ERROR_DETAILS: bool | None = Field(
        default=None,
        description="Include raw error detail in 500 responses (default: development only)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    PORT: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="*",
        description="Allowed CORS origins (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("DISPLAY_TIMEZONE")
    @classmethod
    def _check_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {value}") from e
        return value

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://myapp.com" -> ["http://localhost:3000", "https://myapp.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def admin_sender_name(self) -> str:
        return self.ADMIN_SENDER_NAME or f"{self.ORGANIZATION_NAME} Application Bot"

    @property
    def confirmation_sender_name(self) -> str:
        return self.CONFIRMATION_SENDER_NAME or f"{self.ORGANIZATION_NAME} Team"

    @property
    def expose_internal_error_details(self) -> bool:
        """Explicit setting wins; otherwise only development exposes details."""
        if self.EXPOSE_INTERNAL_ERROR_DETAILS is not None:
            return self.EXPOSE_INTERNAL_ERROR_DETAILS
        return self.is_development

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
