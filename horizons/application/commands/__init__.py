"""Verification commands (CQRS write operations)."""

from horizons.application.commands.verification_commands import (
    CompleteEmailChange,
    CompleteInvite,
    CompletePasswordReset,
    InviteUser,
    RequestEmailChange,
    RequestPasswordReset,
    VerifyPasswordResetCode,
)

__all__ = [
    "CompleteEmailChange",
    "CompleteInvite",
    "CompletePasswordReset",
    "InviteUser",
    "RequestEmailChange",
    "RequestPasswordReset",
    "VerifyPasswordResetCode",
]
