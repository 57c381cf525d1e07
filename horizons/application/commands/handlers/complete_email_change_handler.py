"""Complete Email Change handler.

Flow:
1. Validate the code against ``emailchange:{user_id}``
2. Load the profile (remember the previous email)
3. Update the auth email (confirmed)
4. Update the profile email
   - On failure, put the previous auth email back; a failed rollback
     leaves auth and profile disagreeing and is logged at critical
5. Consume the code
6. Return the updated profile

The code is only consumed when both stores were updated, so a failed
attempt can be retried with the same code. A failed consume fails the
request; the retry writes the same email again and consumes the code.
"""

from datetime import UTC, datetime

from horizons.application.commands.verification_commands import CompleteEmailChange
from horizons.application.errors import (
    ApplicationError,
    from_domain_error,
    verification_failed,
)
from horizons.application.services import VerificationSessionManager
from horizons.core.enums import ErrorCode
from horizons.core.errors import NotFoundError
from horizons.core.result import Failure, Result, Success
from horizons.domain.entities import Profile
from horizons.domain.enums import VerificationNamespace
from horizons.domain.protocols import AuthProviderProtocol, LoggerProtocol, ProfileRepository
from horizons.domain.validators import mask_email

_NAMESPACE = VerificationNamespace.EMAIL_CHANGE


class CompleteEmailChangeHandler:
    """Handler for the complete email change command."""

    def __init__(
        self,
        *,
        auth_provider: AuthProviderProtocol,
        profiles: ProfileRepository,
        sessions: VerificationSessionManager,
        logger: LoggerProtocol,
    ) -> None:
        self._auth_provider = auth_provider
        self._profiles = profiles
        self._sessions = sessions
        self._logger = logger

    async def handle(self, cmd: CompleteEmailChange) -> Result[Profile, ApplicationError]:
        match await self._sessions.validate(_NAMESPACE, cmd.user_id, cmd.code):
            case Failure(error=error):
                return Failure(error=from_domain_error(error))
            case Success(value=None):
                self._logger.info("email_change_code_rejected", user_id=cmd.user_id)
                return Failure(error=verification_failed(_NAMESPACE))
            case Success(value=grant):
                pass

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

        previous_email = profile.email
        new_email = grant.new_email

        match await self._auth_provider.set_email(cmd.user_id, new_email, confirmed=True):
            case Failure(error=error):
                self._logger.error("email_change_auth_failed", error=error, user_id=cmd.user_id)
                return Failure(error=from_domain_error(error))
            case Success():
                pass

        match await self._profiles.update_profile(
            cmd.user_id,
            {"email": new_email, "updated_at": datetime.now(UTC).isoformat()},
        ):
            case Failure(error=error):
                self._logger.error(
                    "email_change_profile_failed", error=error, user_id=cmd.user_id
                )
                await self._rollback_auth_email(cmd.user_id, previous_email)
                return Failure(error=from_domain_error(error))
            case Success(value=updated):
                pass

        match await self._sessions.consume(_NAMESPACE, cmd.user_id):
            case Failure(error=error):
                self._logger.error(
                    "email_change_code_not_consumed", error=error, user_id=cmd.user_id
                )
                return Failure(error=from_domain_error(error))
            case Success():
                pass

        self._logger.info(
            "email_change_completed", user_id=cmd.user_id, email=mask_email(new_email)
        )
        return Success(value=updated)

    async def _rollback_auth_email(self, user_id: str, previous_email: str) -> None:
        match await self._auth_provider.set_email(user_id, previous_email, confirmed=True):
            case Failure(error=error):
                self._logger.critical(
                    "email_change_rollback_failed",
                    error=error,
                    user_id=user_id,
                    previous_email=mask_email(previous_email),
                )
            case Success():
                self._logger.warning("email_change_rolled_back", user_id=user_id)
