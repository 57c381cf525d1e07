"""Complete Password Reset handler.

Flow:
1. Validate the new password
2. Validate the code against ``pwdreset:{email}`` (not consumed yet)
3. Resolve the account
4. Set the new password
5. Consume the code
6. Return Success

Any failure before step 5 leaves the code in place, so the user can retry
with the same code until it expires. A failed consume is reported as
unavailable rather than success: the code must not outlive a completed
reset, and retrying sets the same password again and then consumes it.
"""

from horizons.application.commands.verification_commands import CompletePasswordReset
from horizons.application.errors import (
    ApplicationError,
    from_domain_error,
    validation_failed,
    verification_failed,
)
from horizons.application.services import VerificationSessionManager
from horizons.core.enums import ErrorCode
from horizons.core.result import Failure, Result, Success
from horizons.domain.enums import VerificationNamespace
from horizons.domain.protocols import AuthProviderProtocol, LoggerProtocol
from horizons.domain.validators import mask_email, normalize_email, validate_password

_NAMESPACE = VerificationNamespace.PASSWORD_RESET


class CompletePasswordResetHandler:
    """Handler for the complete password reset command."""

    def __init__(
        self,
        *,
        auth_provider: AuthProviderProtocol,
        sessions: VerificationSessionManager,
        logger: LoggerProtocol,
    ) -> None:
        self._auth_provider = auth_provider
        self._sessions = sessions
        self._logger = logger

    async def handle(self, cmd: CompletePasswordReset) -> Result[None, ApplicationError]:
        try:
            validate_password(cmd.new_password)
        except ValueError as e:
            return Failure(
                error=validation_failed(
                    str(e), field="new_password", code=ErrorCode.INVALID_PASSWORD
                )
            )

        email = normalize_email(cmd.email)
        masked = mask_email(email)

        match await self._sessions.validate(_NAMESPACE, email, cmd.code):
            case Failure(error=error):
                return Failure(error=from_domain_error(error))
            case Success(value=None):
                self._logger.info("password_reset_code_rejected", email=masked)
                return Failure(error=verification_failed(_NAMESPACE))
            case Success():
                pass

        match await self._auth_provider.find_account_by_email(email):
            case Failure(error=error):
                return Failure(error=from_domain_error(error))
            case Success(value=None):
                # Account deleted after the code was issued
                self._logger.warning("password_reset_account_missing", email=masked)
                return Failure(error=verification_failed(_NAMESPACE))
            case Success(value=account):
                pass

        match await self._auth_provider.set_password(account.user_id, cmd.new_password):
            case Failure(error=error):
                self._logger.error("password_reset_update_failed", error=error, email=masked)
                return Failure(error=from_domain_error(error))
            case Success():
                pass

        match await self._sessions.consume(_NAMESPACE, email):
            case Failure(error=error):
                # Code is still live; the client retries and the retry consumes it
                self._logger.error("password_reset_code_not_consumed", error=error, email=masked)
                return Failure(error=from_domain_error(error))
            case Success():
                pass

        self._logger.info("password_reset_completed", user_id=account.user_id)
        return Success(value=None)
