"""Unit tests for Settings."""

import pytest
from pydantic import ValidationError

from horizons.core.config import Settings
from horizons.core.enums import Environment


@pytest.mark.unit
class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.password_reset_code_ttl_seconds == 900
        assert settings.invite_token_ttl_seconds == 172_800
        assert settings.email_change_code_ttl_seconds == 900
        assert settings.email_backend == "stub"

    def test_urls_lose_trailing_slash(self):
        settings = Settings(
            _env_file=None,
            frontend_url="https://app.example.com/",
            supabase_url="https://proj.supabase.co/",
        )

        assert settings.frontend_url == "https://app.example.com"
        assert settings.supabase_url == "https://proj.supabase.co"

    @pytest.mark.parametrize(
        "field",
        [
            "password_reset_code_ttl_seconds",
            "invite_token_ttl_seconds",
            "email_change_code_ttl_seconds",
        ],
    )
    def test_ttls_must_be_positive(self, field):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **{field: 0})

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("INVITE_TOKEN_TTL_SECONDS", "60")
        monkeypatch.setenv("ENVIRONMENT", "production")

        settings = Settings(_env_file=None)

        assert settings.invite_token_ttl_seconds == 60
        assert settings.environment is Environment.PRODUCTION
        assert settings.use_json_logs

    def test_cors_origin_list(self):
        settings = Settings(_env_file=None, cors_origins="https://a.com, https://b.com,")

        assert settings.cors_origin_list == ["https://a.com", "https://b.com"]
