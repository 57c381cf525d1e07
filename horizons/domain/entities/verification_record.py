"""Verification records and their per-namespace grants.

A VerificationRecord is the only state the verification subsystem owns. It
is created, read and deleted; never mutated. Expiry is not a field: the
key-value store's TTL evicts the record, after which it is indistinguishable
from one that was never issued.

Each namespace carries its own grant type (what a successful validation
authorizes):

    PASSWORD_RESET  -> PasswordResetGrant(email)
    INVITE          -> InviteGrant(email)
    EMAIL_CHANGE    -> EmailChangeGrant(user_id, new_email)
    SIGNATURE_LINK  -> SignatureLinkGrant(user_id, cra_id)
"""

from dataclasses import dataclass

from horizons.domain.enums import VerificationNamespace


@dataclass(frozen=True, slots=True, kw_only=True)
class PasswordResetGrant:
    """Permission to set a new password for ``email``."""

    email: str


@dataclass(frozen=True, slots=True, kw_only=True)
class InviteGrant:
    """Permission for the invited ``email`` to set its first password."""

    email: str


@dataclass(frozen=True, slots=True, kw_only=True)
class EmailChangeGrant:
    """Permission for ``user_id`` to switch to ``new_email``."""

    user_id: str
    new_email: str


@dataclass(frozen=True, slots=True, kw_only=True)
class SignatureLinkGrant:
    """Public access to sign CRA ``cra_id`` belonging to ``user_id``."""

    user_id: str
    cra_id: str


type VerificationGrant = PasswordResetGrant | InviteGrant | EmailChangeGrant | SignatureLinkGrant

_GRANT_TYPES: dict[VerificationNamespace, type] = {
    VerificationNamespace.PASSWORD_RESET: PasswordResetGrant,
    VerificationNamespace.INVITE: InviteGrant,
    VerificationNamespace.EMAIL_CHANGE: EmailChangeGrant,
    VerificationNamespace.SIGNATURE_LINK: SignatureLinkGrant,
}


@dataclass(frozen=True, slots=True, kw_only=True)
class VerificationRecord:
    """A single-use, time-boxed verification record.

    Attributes:
        namespace: Flow the record belongs to.
        lookup_key: Key discriminator. The subject (email / user id) for
            code-style namespaces, the secret itself for link-style ones.
        secret: 6-digit code or opaque token.
        grant: Namespace-specific payload.

    Raises:
        ValueError: If the grant type does not match the namespace, or a
            link-style record is not addressed by its own secret.
    """

    namespace: VerificationNamespace
    lookup_key: str
    secret: str
    grant: VerificationGrant

    def __post_init__(self) -> None:
        expected = _GRANT_TYPES[self.namespace]
        if not isinstance(self.grant, expected):
            raise ValueError(
                f"{self.namespace.name} records carry {expected.__name__}, "
                f"got {type(self.grant).__name__}"
            )
        if self.namespace.keyed_by_secret and self.lookup_key != self.secret:
            raise ValueError(f"{self.namespace.name} records are addressed by their secret")

    @property
    def subject(self) -> str:
        """Who the record is about: an email or a user id."""
        match self.grant:
            case PasswordResetGrant(email=email) | InviteGrant(email=email):
                return email
            case EmailChangeGrant(user_id=user_id) | SignatureLinkGrant(user_id=user_id):
                return user_id

    @classmethod
    def password_reset(cls, *, email: str, code: str) -> "VerificationRecord":
        return cls(
            namespace=VerificationNamespace.PASSWORD_RESET,
            lookup_key=email,
            secret=code,
            grant=PasswordResetGrant(email=email),
        )

    @classmethod
    def invite(cls, *, email: str, token: str) -> "VerificationRecord":
        return cls(
            namespace=VerificationNamespace.INVITE,
            lookup_key=token,
            secret=token,
            grant=InviteGrant(email=email),
        )

    @classmethod
    def email_change(cls, *, user_id: str, new_email: str, code: str) -> "VerificationRecord":
        return cls(
            namespace=VerificationNamespace.EMAIL_CHANGE,
            lookup_key=user_id,
            secret=code,
            grant=EmailChangeGrant(user_id=user_id, new_email=new_email),
        )

    @classmethod
    def signature_link(cls, *, user_id: str, cra_id: str, token: str) -> "VerificationRecord":
        return cls(
            namespace=VerificationNamespace.SIGNATURE_LINK,
            lookup_key=token,
            secret=token,
            grant=SignatureLinkGrant(user_id=user_id, cra_id=cra_id),
        )
