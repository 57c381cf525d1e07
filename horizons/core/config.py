"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables (or a .env file)
- Type validation via Pydantic

Usage:
    from horizons.core.config import get_settings

    settings = get_settings()
    ttl = settings.password_reset_code_ttl_seconds
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from horizons.core.constants import (
    EMAIL_CHANGE_CODE_TTL_DEFAULT,
    HTTP_TIMEOUT_DEFAULT,
    INVITE_TOKEN_TTL_DEFAULT,
    PASSWORD_RESET_CODE_TTL_DEFAULT,
)
from horizons.core.enums import Environment


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. .env file in the working directory
        3. Default values (only for non-sensitive config)
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(default="Horizons API", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    api_v1_prefix: str = Field(default="/api/v1", description="API v1 route prefix")
    api_base_url: str = Field(
        default="http://localhost:8000",
        description="Public API base URL, used in problem-details type URIs",
    )
    frontend_url: str = Field(
        default="http://localhost:5173",
        description="Frontend base URL embedded in invitation links",
    )
    cors_origins: str = Field(
        default="http://localhost:5173,http://localhost:3000",
        description="Allowed CORS origins (comma-separated)",
    )

    # Cache configuration (Redis)
    redis_url: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL (e.g., redis://host:port/db)",
    )

    # Supabase (authentication provider + profiles table)
    supabase_url: str = Field(
        default="http://localhost:54321",
        description="Supabase project URL",
    )
    supabase_service_role_key: str = Field(
        default="",
        description="Supabase service-role key (admin API access)",
    )
    http_timeout_seconds: float = Field(
        default=HTTP_TIMEOUT_DEFAULT,
        description="Timeout for outbound HTTP calls (Supabase, mail API)",
    )

    # Email
    email_backend: Literal["stub", "http"] = Field(
        default="stub",
        description="Mail transport: 'stub' logs messages, 'http' posts to the mail API",
    )
    email_api_url: str = Field(
        default="https://api.zeptomail.eu/v1.1/email",
        description="Transactional mail API endpoint",
    )
    email_api_token: str = Field(default="", description="Mail API token")
    email_from_address: str = Field(
        default="no-reply@horizons.local",
        description="Sender address for transactional mail",
    )
    email_from_name: str = Field(default="Horizons", description="Sender name")

    # Verification lifetimes (seconds)
    password_reset_code_ttl_seconds: int = Field(
        default=PASSWORD_RESET_CODE_TTL_DEFAULT,
        description="Password reset code lifetime",
    )
    invite_token_ttl_seconds: int = Field(
        default=INVITE_TOKEN_TTL_DEFAULT,
        description="Invitation link lifetime",
    )
    email_change_code_ttl_seconds: int = Field(
        default=EMAIL_CHANGE_CODE_TTL_DEFAULT,
        description="Email change code lifetime",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("api_base_url", "frontend_url", "supabase_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Remove trailing slashes from URLs."""
        return v.rstrip("/")

    @field_validator(
        "password_reset_code_ttl_seconds",
        "invite_token_ttl_seconds",
        "email_change_code_ttl_seconds",
    )
    @classmethod
    def validate_ttl(cls, v: int) -> int:
        """
        Validate verification lifetimes.

        Raises:
            ValueError: If the TTL is not strictly positive.
        """
        if v <= 0:
            raise ValueError("verification TTLs must be positive")
        return v

    @property
    def cors_origin_list(self) -> list[str]:
        """Parsed CORS origins."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION

    @property
    def use_json_logs(self) -> bool:
        """JSON logs everywhere except local development."""
        return self.environment != Environment.DEVELOPMENT


@lru_cache()
def get_settings() -> Settings:
    """Return the application-scoped settings singleton."""
    return Settings()
