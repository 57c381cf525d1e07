"""Verification commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments
(kw_only=True). Emails arrive already normalized by the request schemas;
handlers normalize again since commands can be built directly.
"""

from dataclasses import dataclass

from horizons.domain.types import Email, NewPassword, OpaqueToken, VerificationCode


@dataclass(frozen=True, kw_only=True)
class RequestPasswordReset:
    """Send a password reset code to ``email`` if an account uses it.

    Example:
        >>> command = RequestPasswordReset(email="jane@example.com")
        >>> result = await handler.handle(command)
    """

    email: Email


@dataclass(frozen=True, kw_only=True)
class VerifyPasswordResetCode:
    """Check a reset code without consuming it."""

    email: Email
    code: VerificationCode


@dataclass(frozen=True, kw_only=True)
class CompletePasswordReset:
    """Set a new password with a valid reset code (consumes the code)."""

    email: Email
    code: VerificationCode
    new_password: NewPassword


@dataclass(frozen=True, kw_only=True)
class InviteUser:
    """Create (or re-invite) a user and send the invitation link.

    Attributes:
        actor_user_id: Id of the authenticated caller.
        actor_role: Role of the caller; only admins may invite.
        name: Display name of the invitee.
        email: Invitee email.
        role: Requested role, case-insensitive (admin, consultant, manager).
        client_id: Optional client the user belongs to.
    """

    actor_user_id: str
    actor_role: str | None
    name: str
    email: Email
    role: str
    client_id: str | None = None


@dataclass(frozen=True, kw_only=True)
class CompleteInvite:
    """Accept an invitation: set the first password and confirm the email."""

    email: Email
    token: OpaqueToken
    new_password: NewPassword


@dataclass(frozen=True, kw_only=True)
class RequestEmailChange:
    """Send a verification code to the new address of ``user_id``."""

    user_id: str
    new_email: Email


@dataclass(frozen=True, kw_only=True)
class CompleteEmailChange:
    """Apply a pending email change with its code."""

    user_id: str
    code: VerificationCode
