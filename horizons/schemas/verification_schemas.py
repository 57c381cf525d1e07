"""Verification flow request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.

RESTful Endpoints:
    POST /api/v1/password-reset-codes               - Request reset code
    POST /api/v1/password-reset-codes/verification  - Check reset code
    POST /api/v1/password-resets                    - Set new password
    POST /api/v1/invitations                        - Invite user (admin)
    POST /api/v1/invitations/acceptance             - Accept invitation
    POST /api/v1/email-change-codes                 - Request email change
    POST /api/v1/email-changes                      - Confirm email change
    GET  /api/v1/signature-links/validation         - Resolve signature link
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from horizons.domain.types import Email, NewPassword, OpaqueToken, VerificationCode


class MessageResponse(BaseModel):
    """Generic acknowledgement."""

    message: str


# =============================================================================
# Password reset
# =============================================================================


class PasswordResetCodeCreateRequest(BaseModel):
    """POST /api/v1/password-reset-codes"""

    email: Email

    model_config = ConfigDict(json_schema_extra={"example": {"email": "jane@example.com"}})


class PasswordResetCodeVerificationRequest(BaseModel):
    """POST /api/v1/password-reset-codes/verification"""

    email: Email
    code: VerificationCode


class PasswordResetCreateRequest(BaseModel):
    """POST /api/v1/password-resets"""

    email: Email
    code: VerificationCode
    new_password: NewPassword

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "jane@example.com",
                "code": "042517",
                "new_password": "Secr3t!",
            }
        }
    )


# =============================================================================
# Invitations
# =============================================================================


class InvitationCreateRequest(BaseModel):
    """POST /api/v1/invitations"""

    name: str = Field(..., min_length=1, max_length=200, examples=["Jane Doe"])
    email: Email
    role: str = Field(
        ...,
        min_length=1,
        max_length=32,
        description="admin, consultant or manager (case-insensitive)",
        examples=["consultant"],
    )
    client_id: str | None = Field(None, description="Client the user belongs to")


class InvitationCreateResponse(BaseModel):
    """201 Created"""

    user_id: str
    email: str
    role: str = Field(..., description="Lowercase role", examples=["consultant"])


class InvitationAcceptanceRequest(BaseModel):
    """POST /api/v1/invitations/acceptance"""

    email: Email
    token: OpaqueToken
    new_password: NewPassword


class SessionResponse(BaseModel):
    access_token: str
    refresh_token: str
    expires_in: int | None = None
    token_type: str = "bearer"


class InvitationAcceptanceResponse(BaseModel):
    """200 OK. ``session`` and ``profile`` are null when sign-in degraded."""

    user_id: str
    email: str
    session: SessionResponse | None = None
    profile: dict[str, Any] | None = None


# =============================================================================
# Email change
# =============================================================================


class EmailChangeCodeCreateRequest(BaseModel):
    """POST /api/v1/email-change-codes"""

    new_email: Email


class EmailChangeCreateRequest(BaseModel):
    """POST /api/v1/email-changes"""

    code: VerificationCode


class ProfileResponse(BaseModel):
    """Updated profile row (role lowercased)."""

    model_config = ConfigDict(extra="allow")

    id: str
    email: str
    name: str | None = None
    role: str | None = None
    active: bool = True
    client_id: str | None = None


# =============================================================================
# Signature links
# =============================================================================


class SignatureLinkValidationResponse(BaseModel):
    """GET /api/v1/signature-links/validation"""

    valid: bool = True
    user_id: str
    cra_id: str
