"""Domain entities."""

from horizons.domain.entities.account import AuthAccount, AuthSession, Profile
from horizons.domain.entities.verification_record import (
    EmailChangeGrant,
    InviteGrant,
    PasswordResetGrant,
    SignatureLinkGrant,
    VerificationGrant,
    VerificationRecord,
)

__all__ = [
    "AuthAccount",
    "AuthSession",
    "EmailChangeGrant",
    "InviteGrant",
    "PasswordResetGrant",
    "Profile",
    "SignatureLinkGrant",
    "VerificationGrant",
    "VerificationRecord",
]
