"""Unit tests for validators, log-safety helpers and UserRole."""

import pytest

from horizons.domain.enums import UserRole
from horizons.domain.validators import (
    mask_email,
    normalize_email,
    truncate_token,
    validate_email,
    validate_password,
)


@pytest.mark.unit
class TestEmailValidation:
    def test_normalize_trims_and_lowercases(self):
        assert normalize_email("  Jane@Example.COM ") == "jane@example.com"

    def test_validate_returns_normalized(self):
        assert validate_email("Jane.Doe@Example.com") == "jane.doe@example.com"

    @pytest.mark.parametrize("value", ["", "jane", "jane@", "@x.com", "jane@x"])
    def test_invalid_formats_raise(self, value):
        with pytest.raises(ValueError, match="Invalid email format"):
            validate_email(value)


@pytest.mark.unit
class TestPasswordValidation:
    def test_accepts_six_characters(self):
        assert validate_password("Secr3t!") == "Secr3t!"

    @pytest.mark.parametrize("value", ["", "      ", "abc"])
    def test_rejects_blank_or_short(self, value):
        with pytest.raises(ValueError):
            validate_password(value)


@pytest.mark.unit
class TestLogSafety:
    def test_mask_email_keeps_first_letter_and_domain(self):
        assert mask_email("jane.doe@example.com") == "j***@example.com"

    def test_mask_email_without_at_sign(self):
        assert mask_email("nonsense") == "***"

    def test_truncate_token_keeps_prefix(self):
        assert truncate_token("abcdefghijklmnop") == "abcdefgh..."

    def test_truncate_short_token_hides_everything(self):
        assert truncate_token("abc") == "***"


@pytest.mark.unit
class TestUserRole:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("admin", UserRole.ADMIN),
            ("CONSULTANT", UserRole.CONSULTANT),
            (" Manager ", UserRole.MANAGER),
        ],
    )
    def test_parse_is_case_insensitive(self, raw, expected):
        assert UserRole.parse(raw) is expected

    def test_parse_unknown_returns_none(self):
        assert UserRole.parse("owner") is None

    def test_stored_value_is_capitalized_and_slug_lowercase(self):
        assert UserRole.CONSULTANT.value == "Consultant"
        assert UserRole.CONSULTANT.slug == "consultant"
