"""Token codec protocol: secret generation, key building and value format."""

from typing import Protocol

from horizons.domain.entities import VerificationRecord
from horizons.domain.enums import VerificationNamespace


class TokenCodecProtocol(Protocol):
    """Generates secrets and (de)serializes verification records."""

    def new_opaque_token(self) -> str:
        """URL-safe, unguessable token for link-style flows."""
        ...

    def new_numeric_code(self) -> str:
        """Fixed-width decimal code for human-typed flows."""
        ...

    def build_key(self, namespace: VerificationNamespace, discriminator: str) -> str:
        """Store key for a namespace and a subject or secret."""
        ...

    def encode(self, record: VerificationRecord) -> str:
        """Serialize the stored value of a record."""
        ...

    def decode(
        self, namespace: VerificationNamespace, lookup_key: str, raw: str
    ) -> VerificationRecord | None:
        """Rebuild a record from its stored value.

        Returns:
            The record, or None when the value is malformed or incomplete.
        """
        ...
