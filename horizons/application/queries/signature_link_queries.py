"""Signature link queries."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class ResolveSignatureLink:
    """Resolve a public signature-link token to its user and CRA.

    Attributes:
        token: Token from the link. May be blank (rejected by the handler).
    """

    token: str | None
