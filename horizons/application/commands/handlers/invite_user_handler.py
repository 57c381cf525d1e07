"""Invite User handler (create or re-invite).

Flow:
1. Caller must be an admin
2. Validate name, email and role (role stored capitalized, e.g. "Consultant")
3. Reuse the auth account for the email, or create one
4. Upsert the profile (active=True)
   - On failure, delete the auth account if this call created it
5. Issue an invite token under ``invite:{token}``
6. Email ``{frontend_url}/accept-invite?token=...&email=...``
   - Send failure is logged; the invitation can be re-sent
7. Return Success(InvitationResult)

Re-inviting issues a new token and revokes the earlier one: only the
newest link for an email can be accepted.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from urllib.parse import urlencode

from horizons.application.commands.verification_commands import InviteUser
from horizons.application.errors import (
    ApplicationError,
    ApplicationErrorCode,
    from_domain_error,
    validation_failed,
)
from horizons.application.services import VerificationSessionManager
from horizons.core.constants import ADMIN_ROLE
from horizons.core.enums import ErrorCode
from horizons.core.errors import AuthorizationError
from horizons.core.result import Failure, Result, Success
from horizons.domain.entities import VerificationRecord
from horizons.domain.enums import UserRole
from horizons.domain.protocols import (
    AuthProviderProtocol,
    EmailProtocol,
    LoggerProtocol,
    ProfileRepository,
    TokenCodecProtocol,
)
from horizons.domain.validators import mask_email, truncate_token, validate_email


@dataclass(frozen=True, kw_only=True)
class InvitationResult:
    """Outcome of an invitation.

    Attributes:
        user_id: Auth account id (reused or created).
        email: Normalized invitee email.
        role: Lowercase role slug.
    """

    user_id: str
    email: str
    role: str


class InviteUserHandler:
    """Handler for the invite user command."""

    def __init__(
        self,
        *,
        auth_provider: AuthProviderProtocol,
        profiles: ProfileRepository,
        sessions: VerificationSessionManager,
        codec: TokenCodecProtocol,
        email_service: EmailProtocol,
        logger: LoggerProtocol,
        frontend_url: str,
        token_ttl_seconds: int,
    ) -> None:
        self._auth_provider = auth_provider
        self._profiles = profiles
        self._sessions = sessions
        self._codec = codec
        self._email_service = email_service
        self._logger = logger
        self._frontend_url = frontend_url.rstrip("/")
        self._token_ttl_seconds = token_ttl_seconds

    def invite_url(self, *, token: str, email: str) -> str:
        return f"{self._frontend_url}/accept-invite?{urlencode({'token': token, 'email': email})}"

    async def handle(self, cmd: InviteUser) -> Result[InvitationResult, ApplicationError]:
        if (cmd.actor_role or "").lower() != ADMIN_ROLE:
            self._logger.warning("invite_forbidden", actor_user_id=cmd.actor_user_id)
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.FORBIDDEN,
                    message="Only administrators can invite users.",
                    domain_error=AuthorizationError(
                        code=ErrorCode.PERMISSION_DENIED,
                        message="Admin role required",
                        required_role=ADMIN_ROLE,
                    ),
                )
            )

        name = cmd.name.strip()
        if not name:
            return Failure(error=validation_failed("Name is required", field="name"))
        try:
            email = validate_email(cmd.email)
        except ValueError as e:
            return Failure(
                error=validation_failed(str(e), field="email", code=ErrorCode.INVALID_EMAIL)
            )
        role = UserRole.parse(cmd.role)
        if role is None:
            return Failure(
                error=validation_failed(
                    "Role must be one of: admin, consultant, manager",
                    field="role",
                    code=ErrorCode.INVALID_ROLE,
                )
            )
        masked = mask_email(email)

        created = False
        match await self._auth_provider.find_account_by_email(email):
            case Failure(error=error):
                return Failure(error=from_domain_error(error))
            case Success(value=None):
                match await self._auth_provider.create_account(email):
                    case Failure(error=error):
                        self._logger.error(
                            "invite_account_create_failed", error=error, email=masked
                        )
                        return Failure(error=from_domain_error(error))
                    case Success(value=account):
                        created = True
            case Success(value=account):
                pass

        profile_fields = {
            "name": name,
            "email": email,
            "role": role.value,
            "active": True,
            "client_id": cmd.client_id,
            "updated_at": datetime.now(UTC).isoformat(),
        }
        match await self._profiles.upsert_profile(account.user_id, profile_fields):
            case Failure(error=error):
                self._logger.error("invite_profile_upsert_failed", error=error, email=masked)
                if created:
                    await self._remove_account(account.user_id)
                return Failure(error=from_domain_error(error))
            case Success():
                pass

        token = self._codec.new_opaque_token()
        record = VerificationRecord.invite(email=email, token=token)
        match await self._sessions.issue(record, self._token_ttl_seconds):
            case Failure(error=error):
                return Failure(error=from_domain_error(error))
            case Success():
                pass

        match await self._email_service.send_invitation(
            to_email=email,
            name=name,
            role=role.value,
            invite_url=self.invite_url(token=token, email=email),
            ttl_hours=self._token_ttl_seconds // 3600,
        ):
            case Failure(error=error):
                self._logger.warning(
                    "invite_email_failed",
                    email=masked,
                    token_prefix=truncate_token(token),
                    error_message=error.message,
                )
            case Success():
                self._logger.info(
                    "invite_sent", email=masked, role=role.slug, created=created
                )

        return Success(value=InvitationResult(user_id=account.user_id, email=email, role=role.slug))

    async def _remove_account(self, user_id: str) -> None:
        match await self._auth_provider.delete_account(user_id):
            case Failure(error=error):
                self._logger.critical(
                    "invite_account_compensation_failed", error=error, user_id=user_id
                )
            case Success():
                self._logger.info("invite_account_compensated", user_id=user_id)
