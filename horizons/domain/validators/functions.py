"""Centralized validation functions.

Validators are pure functions that raise ValueError on failure; they back the
Annotated types in ``horizons/domain/types.py`` and are called directly by
handlers that receive already-parsed input.
"""

import re

from horizons.core.constants import PASSWORD_MIN_LENGTH, TOKEN_LOG_PREFIX_LENGTH

_EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def normalize_email(v: str) -> str:
    """Trim and lowercase an email address.

    Example:
        >>> normalize_email("  Jane@X.com ")
        'jane@x.com'
    """
    return v.strip().lower()


def validate_email(v: str) -> str:
    """Validate email format.

    Returns:
        Normalized email (trimmed, lowercase).

    Raises:
        ValueError: If email format is invalid.
    """
    normalized = normalize_email(v)
    if not _EMAIL_PATTERN.match(normalized):
        raise ValueError("Invalid email format")
    return normalized


def validate_password(v: str) -> str:
    """Validate a new password against the provider's minimum.

    Raises:
        ValueError: If the password is too short or blank.
    """
    if not v.strip():
        raise ValueError("Password must not be blank")
    if len(v) < PASSWORD_MIN_LENGTH:
        raise ValueError(f"Password must be at least {PASSWORD_MIN_LENGTH} characters")
    return v


def mask_email(email: str) -> str:
    """Mask an email for logs.

    Example:
        >>> mask_email("jane.doe@example.com")
        'j***@example.com'
    """
    local, sep, domain = email.partition("@")
    if not sep:
        return "***"
    return f"{local[:1]}***@{domain}"


def truncate_token(token: str) -> str:
    """Keep only a short prefix of a token for log correlation."""
    if len(token) <= TOKEN_LOG_PREFIX_LENGTH:
        return "***"
    return token[:TOKEN_LOG_PREFIX_LENGTH] + "..."
