"""Resolve Signature Link query handler.

Public, unauthenticated: a CRA owner's signer opens a link carrying
``token``; the CRA subsystem wrote ``signlink:{token}`` with the user and
CRA ids. Resolution never consumes the link, it stays usable until its TTL.
"""

from dataclasses import dataclass

from horizons.application.errors import (
    ApplicationError,
    from_domain_error,
    validation_failed,
    verification_failed,
)
from horizons.application.queries.signature_link_queries import ResolveSignatureLink
from horizons.application.services import VerificationSessionManager
from horizons.core.enums import ErrorCode
from horizons.core.result import Failure, Result, Success
from horizons.domain.enums import VerificationNamespace
from horizons.domain.protocols import LoggerProtocol
from horizons.domain.validators import truncate_token

_NAMESPACE = VerificationNamespace.SIGNATURE_LINK


@dataclass(frozen=True, kw_only=True)
class SignatureLinkTarget:
    """What a valid signature link points at."""

    user_id: str
    cra_id: str


class ResolveSignatureLinkHandler:
    """Handler for the resolve signature link query."""

    def __init__(self, *, sessions: VerificationSessionManager, logger: LoggerProtocol) -> None:
        self._sessions = sessions
        self._logger = logger

    async def handle(
        self, query: ResolveSignatureLink
    ) -> Result[SignatureLinkTarget, ApplicationError]:
        token = (query.token or "").strip()
        if not token:
            return Failure(
                error=validation_failed(
                    "Token required", field="token", code=ErrorCode.TOKEN_REQUIRED
                )
            )

        match await self._sessions.validate(_NAMESPACE, token, token):
            case Failure(error=error):
                return Failure(error=from_domain_error(error))
            case Success(value=None):
                self._logger.info(
                    "signature_link_rejected", token_prefix=truncate_token(token)
                )
                return Failure(error=verification_failed(_NAMESPACE))
            case Success(value=grant):
                return Success(
                    value=SignatureLinkTarget(user_id=grant.user_id, cra_id=grant.cra_id)
                )
