"""Validation functions and log-safety helpers."""

from horizons.domain.validators.functions import (
    mask_email,
    normalize_email,
    truncate_token,
    validate_email,
    validate_password,
)

__all__ = [
    "mask_email",
    "normalize_email",
    "truncate_token",
    "validate_email",
    "validate_password",
]
