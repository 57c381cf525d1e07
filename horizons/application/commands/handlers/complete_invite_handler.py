"""Complete Invite handler.

Flow:
1. Validate the new password
2. Resolve ``invite:{token}``; the stored email must equal the submitted one
3. Set the password and mark the email confirmed
4. Consume the token
5. Sign in and load the profile (best effort)

Only the newest invitation for an email validates; re-inviting revokes the
earlier link. Steps 1-4 failing leave the token usable, including a failed
consume, which is reported as unavailable. After the token is consumed the
invitation is complete: a failed sign-in or profile load only degrades the
response (``session``/``profile`` are None and the client signs in itself).
"""

from dataclasses import dataclass

from horizons.application.commands.verification_commands import CompleteInvite
from horizons.application.errors import (
    ApplicationError,
    from_domain_error,
    validation_failed,
    verification_failed,
)
from horizons.application.services import VerificationSessionManager
from horizons.core.enums import ErrorCode
from horizons.core.result import Failure, Result, Success
from horizons.domain.entities import AuthSession, Profile
from horizons.domain.enums import VerificationNamespace
from horizons.domain.protocols import (
    AuthProviderProtocol,
    LoggerProtocol,
    ProfileRepository,
)
from horizons.domain.validators import (
    mask_email,
    normalize_email,
    truncate_token,
    validate_password,
)

_NAMESPACE = VerificationNamespace.INVITE


@dataclass(frozen=True, kw_only=True)
class InviteCompletion:
    """Outcome of an accepted invitation."""

    user_id: str
    email: str
    session: AuthSession | None = None
    profile: Profile | None = None


class CompleteInviteHandler:
    """Handler for the complete invite command."""

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

    async def handle(self, cmd: CompleteInvite) -> Result[InviteCompletion, ApplicationError]:
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
        token_prefix = truncate_token(cmd.token)

        match await self._sessions.validate(_NAMESPACE, cmd.token, cmd.token):
            case Failure(error=error):
                return Failure(error=from_domain_error(error))
            case Success(value=None):
                self._logger.info("invite_token_rejected", token_prefix=token_prefix)
                return Failure(error=verification_failed(_NAMESPACE))
            case Success(value=grant):
                pass

        if normalize_email(grant.email) != email:
            self._logger.warning(
                "invite_email_mismatch", token_prefix=token_prefix, email=masked
            )
            return Failure(error=verification_failed(_NAMESPACE))

        match await self._auth_provider.find_account_by_email(email):
            case Failure(error=error):
                return Failure(error=from_domain_error(error))
            case Success(value=None):
                self._logger.warning("invite_account_missing", email=masked)
                return Failure(error=verification_failed(_NAMESPACE))
            case Success(value=account):
                pass

        match await self._auth_provider.set_password(account.user_id, cmd.new_password):
            case Failure(error=error):
                self._logger.error("invite_password_update_failed", error=error, email=masked)
                return Failure(error=from_domain_error(error))
            case Success():
                pass

        match await self._auth_provider.set_email(account.user_id, email, confirmed=True):
            case Failure(error=error):
                self._logger.error("invite_email_confirm_failed", error=error, email=masked)
                return Failure(error=from_domain_error(error))
            case Success():
                pass

        match await self._sessions.consume(_NAMESPACE, cmd.token, subject=email):
            case Failure(error=error):
                self._logger.error(
                    "invite_token_not_consumed", error=error, token_prefix=token_prefix
                )
                return Failure(error=from_domain_error(error))
            case Success():
                pass

        session: AuthSession | None = None
        match await self._auth_provider.authenticate(email, cmd.new_password):
            case Failure(error=error):
                self._logger.warning(
                    "invite_sign_in_degraded", email=masked, error_message=error.message
                )
            case Success(value=session):
                pass

        profile: Profile | None = None
        match await self._profiles.get_profile(account.user_id):
            case Failure(error=error):
                self._logger.warning(
                    "invite_profile_load_degraded",
                    user_id=account.user_id,
                    error_message=error.message,
                )
            case Success(value=profile):
                pass

        self._logger.info("invite_completed", user_id=account.user_id)
        return Success(
            value=InviteCompletion(
                user_id=account.user_id, email=email, session=session, profile=profile
            )
        )
