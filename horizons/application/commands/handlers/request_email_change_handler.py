"""Request Email Change handler.

Flow:
1. Validate the new email
2. Load the caller's profile; reject an unchanged email (case-insensitive)
3. Reject an email already used by another profile
4. Issue a 6-digit code under ``emailchange:{user_id}`` (replaces any
   pending change)
5. Email the code to the NEW address
   - Confirmed failure: delete the code and report the mail error (the user
     must know the code never left)
   - Ambiguous failure (timeout): keep the code and report success
"""

from horizons.application.commands.verification_commands import RequestEmailChange
from horizons.application.errors import (
    ApplicationError,
    ApplicationErrorCode,
    from_domain_error,
    validation_failed,
)
from horizons.application.services import VerificationSessionManager
from horizons.core.enums import ErrorCode
from horizons.core.errors import ConflictError, NotFoundError
from horizons.core.result import Failure, Result, Success
from horizons.domain.entities import VerificationRecord
from horizons.domain.enums import VerificationNamespace
from horizons.domain.protocols import (
    EmailProtocol,
    LoggerProtocol,
    ProfileRepository,
    TokenCodecProtocol,
)
from horizons.domain.validators import mask_email, normalize_email, validate_email


class RequestEmailChangeHandler:
    """Handler for the request email change command."""

    def __init__(
        self,
        *,
        profiles: ProfileRepository,
        sessions: VerificationSessionManager,
        codec: TokenCodecProtocol,
        email_service: EmailProtocol,
        logger: LoggerProtocol,
        code_ttl_seconds: int,
    ) -> None:
        self._profiles = profiles
        self._sessions = sessions
        self._codec = codec
        self._email_service = email_service
        self._logger = logger
        self._code_ttl_seconds = code_ttl_seconds

    async def handle(self, cmd: RequestEmailChange) -> Result[None, ApplicationError]:
        try:
            new_email = validate_email(cmd.new_email)
        except ValueError as e:
            return Failure(
                error=validation_failed(str(e), field="new_email", code=ErrorCode.INVALID_EMAIL)
            )
        masked = mask_email(new_email)

        match await self._profiles.get_profile(cmd.user_id):
            case Failure(error=error):
                return Failure(error=from_domain_error(error))
            case Success(value=None):
                return Failure(
                    error=from_domain_error(
                        NotFoundError(
                            code=ErrorCode.PROFILE_NOT_FOUND,
                            message="Profile not found",
                            resource_type="Profile",
                            resource_id=cmd.user_id,
                        )
                    )
                )
            case Success(value=profile):
                pass

        if normalize_email(profile.email) == new_email:
            return Failure(
                error=from_domain_error(
                    ConflictError(
                        code=ErrorCode.EMAIL_UNCHANGED,
                        message="New email is identical to the current one.",
                        resource_type="Profile",
                        conflicting_field="email",
                    )
                )
            )

        match await self._profiles.get_profile_by_email(new_email):
            case Failure(error=error):
                return Failure(error=from_domain_error(error))
            case Success(value=None):
                pass
            case Success(value=other) if other.id != cmd.user_id:
                return Failure(
                    error=from_domain_error(
                        ConflictError(
                            code=ErrorCode.EMAIL_ALREADY_EXISTS,
                            message="This email is already in use.",
                            resource_type="Profile",
                            conflicting_field="email",
                        )
                    )
                )
            case Success():
                pass

        code = self._codec.new_numeric_code()
        record = VerificationRecord.email_change(
            user_id=cmd.user_id, new_email=new_email, code=code
        )
        match await self._sessions.issue(record, self._code_ttl_seconds):
            case Failure(error=error):
                return Failure(error=from_domain_error(error))
            case Success():
                pass

        match await self._email_service.send_email_change_code(
            to_email=new_email, code=code, ttl_minutes=self._code_ttl_seconds // 60
        ):
            case Success():
                self._logger.info("email_change_code_sent", user_id=cmd.user_id, email=masked)
            case Failure(error=error) if error.is_ambiguous:
                self._logger.warning(
                    "email_change_email_ambiguous",
                    user_id=cmd.user_id,
                    error_message=error.message,
                )
            case Failure(error=error):
                self._logger.error(
                    "email_change_email_failed", error=error, user_id=cmd.user_id, email=masked
                )
                match await self._sessions.consume(
                    VerificationNamespace.EMAIL_CHANGE, cmd.user_id
                ):
                    case Failure(error=cleanup_error):
                        self._logger.error(
                            "email_change_code_cleanup_failed",
                            error=cleanup_error,
                            user_id=cmd.user_id,
                        )
                    case Success():
                        pass
                return Failure(
                    error=ApplicationError(
                        code=ApplicationErrorCode.EXTERNAL_SERVICE_ERROR,
                        message="The verification email could not be sent.",
                        domain_error=error,
                    )
                )

        return Success(value=None)
