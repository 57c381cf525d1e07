"""Annotated types with centralized validation.

Usage:
    from horizons.domain.types import Email, NewPassword

    class PasswordResetCreateRequest(BaseModel):
        email: Email
        new_password: NewPassword
"""

from typing import Annotated

from pydantic import AfterValidator, Field

from horizons.core.constants import NUMERIC_CODE_LENGTH, PASSWORD_MIN_LENGTH
from horizons.domain.validators import validate_email, validate_password

Email = Annotated[
    str,
    Field(
        min_length=5,
        max_length=255,
        description="Email address",
        examples=["jane@example.com"],
    ),
    AfterValidator(validate_email),
]
"""Email address, validated and normalized to lowercase."""

NewPassword = Annotated[
    str,
    Field(
        min_length=PASSWORD_MIN_LENGTH,
        max_length=128,
        description="New account password",
        examples=["Secr3t!"],
    ),
    AfterValidator(validate_password),
]

VerificationCode = Annotated[
    str,
    Field(
        min_length=1,
        max_length=NUMERIC_CODE_LENGTH * 2,
        description="Code received by email",
        examples=["042517"],
    ),
]
"""Human-typed code. Only bounded here: a malformed code must fail as an
ordinary invalid code, not as a distinct validation error."""

OpaqueToken = Annotated[
    str,
    Field(
        min_length=1,
        max_length=512,
        description="Token taken from a link",
    ),
]
