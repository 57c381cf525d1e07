"""Verification cache key construction.

Keys follow ``{namespace tag}:{discriminator}``:

    pwdreset:{email}
    invite:{token}
    invite:{email}      (current invite token)
    emailchange:{user_id}
    signlink:{token}

No application prefix is added: the CRA subsystem writes ``signlink:`` keys
with this exact layout and both sides must agree.
"""

from dataclasses import dataclass

from horizons.domain.enums import VerificationNamespace


@dataclass(frozen=True)
class CacheKeys:
    """Centralized verification key construction.

    The namespace tags contain no ``:``, so two namespaces can never produce
    the same key for the same discriminator.

    Example:
        keys = CacheKeys()
        keys.verification(VerificationNamespace.INVITE, token)  # "invite:{token}"
    """

    def verification(self, namespace: VerificationNamespace, discriminator: str) -> str:
        """Key of a verification record.

        Raises:
            ValueError: If the discriminator is empty.
        """
        if not discriminator:
            raise ValueError("verification key discriminator must not be empty")
        return f"{namespace.value}:{discriminator}"
