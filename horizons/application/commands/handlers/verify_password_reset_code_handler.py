"""Verify Password Reset Code handler.

Lets the client check a code before asking for the new password. The code
is NOT consumed: CompletePasswordReset validates it again.
"""

from horizons.application.commands.verification_commands import VerifyPasswordResetCode
from horizons.application.errors import (
    ApplicationError,
    from_domain_error,
    verification_failed,
)
from horizons.application.services import VerificationSessionManager
from horizons.core.result import Failure, Result, Success
from horizons.domain.enums import VerificationNamespace
from horizons.domain.validators import normalize_email


class VerifyPasswordResetCodeHandler:
    """Handler for the verify password reset code command."""

    def __init__(self, *, sessions: VerificationSessionManager) -> None:
        self._sessions = sessions

    async def handle(self, cmd: VerifyPasswordResetCode) -> Result[None, ApplicationError]:
        match await self._sessions.validate(
            VerificationNamespace.PASSWORD_RESET, normalize_email(cmd.email), cmd.code
        ):
            case Failure(error=error):
                return Failure(error=from_domain_error(error))
            case Success(value=None):
                return Failure(error=verification_failed(VerificationNamespace.PASSWORD_RESET))
            case Success():
                return Success(value=None)
