"""Verification failure.

There is exactly one verification failure per flow. Whether the record
expired, was never issued, was already consumed, or the code was wrong is
deliberately not represented: the caller only learns "invalid or expired".
"""

from dataclasses import dataclass

from horizons.core.enums import ErrorCode
from horizons.core.errors import DomainError
from horizons.domain.enums import VerificationNamespace

_MESSAGES: dict[VerificationNamespace, str] = {
    VerificationNamespace.PASSWORD_RESET: "Invalid or expired reset code.",
    VerificationNamespace.INVITE: "Invalid or expired invitation link.",
    VerificationNamespace.EMAIL_CHANGE: "Invalid or expired verification code.",
    VerificationNamespace.SIGNATURE_LINK: "Invalid or expired signature link.",
}


@dataclass(frozen=True, slots=True, kw_only=True)
class VerificationError(DomainError):
    """Code or token absent, mismatched, or past its time-to-live.

    Attributes:
        namespace: Flow the failed verification belongs to.
    """

    namespace: VerificationNamespace

    @classmethod
    def for_namespace(cls, namespace: VerificationNamespace) -> "VerificationError":
        return cls(
            code=ErrorCode.VERIFICATION_INVALID_OR_EXPIRED,
            message=_MESSAGES[namespace],
            namespace=namespace,
        )
