"""Request Password Reset handler.

Flow:
1. Look up the account by email
2. If no account: return Success (no user enumeration)
3. Issue a 6-digit code under ``pwdreset:{email}`` (replaces any earlier one)
4. Email the code
5. Confirmed send failure: delete the code (nobody can receive it);
   ambiguous failure (timeout): keep it, the message may have arrived
6. Return Success(message)

Security:
- Answers identically whether or not the email exists
- Store or provider outages are still reported (retryable 503)
"""

from dataclasses import dataclass

from horizons.application.commands.verification_commands import RequestPasswordReset
from horizons.application.errors import ApplicationError, from_domain_error
from horizons.application.services import VerificationSessionManager
from horizons.core.result import Failure, Result, Success
from horizons.domain.entities import VerificationRecord
from horizons.domain.enums import VerificationNamespace
from horizons.domain.protocols import (
    AuthProviderProtocol,
    EmailProtocol,
    LoggerProtocol,
    TokenCodecProtocol,
)
from horizons.domain.validators import mask_email, normalize_email


@dataclass
class PasswordResetRequestResponse:
    """Response data for password reset request.

    Note: Always the same message to prevent user enumeration.
    """

    message: str = "If an account with that email exists, a reset code has been sent."


class RequestPasswordResetHandler:
    """Handler for the request password reset command."""

    def __init__(
        self,
        *,
        auth_provider: AuthProviderProtocol,
        sessions: VerificationSessionManager,
        codec: TokenCodecProtocol,
        email_service: EmailProtocol,
        logger: LoggerProtocol,
        code_ttl_seconds: int,
    ) -> None:
        self._auth_provider = auth_provider
        self._sessions = sessions
        self._codec = codec
        self._email_service = email_service
        self._logger = logger
        self._code_ttl_seconds = code_ttl_seconds

    async def handle(
        self, cmd: RequestPasswordReset
    ) -> Result[PasswordResetRequestResponse, ApplicationError]:
        """Handle password reset request command.

        Returns:
            Success(PasswordResetRequestResponse) for known and unknown
            emails alike; Failure only when a collaborator is unavailable.
        """
        email = normalize_email(cmd.email)
        masked = mask_email(email)

        match await self._auth_provider.find_account_by_email(email):
            case Failure(error=error):
                self._logger.error("password_reset_lookup_failed", error=error, email=masked)
                return Failure(error=from_domain_error(error))
            case Success(value=None):
                self._logger.info("password_reset_unknown_email", email=masked)
                return Success(value=PasswordResetRequestResponse())
            case Success(value=_):
                pass

        code = self._codec.new_numeric_code()
        record = VerificationRecord.password_reset(email=email, code=code)
        match await self._sessions.issue(record, self._code_ttl_seconds):
            case Failure(error=error):
                return Failure(error=from_domain_error(error))
            case Success():
                pass

        match await self._email_service.send_password_reset_code(
            to_email=email, code=code, ttl_minutes=self._code_ttl_seconds // 60
        ):
            case Success():
                self._logger.info("password_reset_code_sent", email=masked)
            case Failure(error=error) if error.is_ambiguous:
                self._logger.warning(
                    "password_reset_email_ambiguous", email=masked, error_message=error.message
                )
            case Failure(error=error):
                self._logger.error("password_reset_email_failed", error=error, email=masked)
                await self._discard_code(email)

        return Success(value=PasswordResetRequestResponse())

    async def _discard_code(self, email: str) -> None:
        match await self._sessions.consume(VerificationNamespace.PASSWORD_RESET, email):
            case Failure(error=error):
                self._logger.error(
                    "password_reset_code_cleanup_failed", error=error, email=mask_email(email)
                )
            case Success():
                pass
