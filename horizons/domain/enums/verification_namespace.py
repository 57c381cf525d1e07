"""Verification record namespaces.

Each namespace scopes one flow's records in the key-value store. The value is
the key tag, so ``VerificationNamespace.INVITE.value == "invite"`` and the
record key is ``invite:{token}``. These tags are shared with the CRA
subsystem, which writes ``signlink:{token}`` records itself.
"""

from enum import Enum


class VerificationNamespace(Enum):
    """Closed set of verification flows."""

    PASSWORD_RESET = "pwdreset"
    INVITE = "invite"
    EMAIL_CHANGE = "emailchange"
    SIGNATURE_LINK = "signlink"

    @property
    def keyed_by_secret(self) -> bool:
        """True when the secret itself is the lookup key (link-style flows).

        Link-style records travel inside a URL, so the token is both the
        address and the proof. Code-style records are addressed by their
        subject (email or user id) and the code is compared on read.
        """
        return self in (VerificationNamespace.INVITE, VerificationNamespace.SIGNATURE_LINK)

    @property
    def tracks_current_secret(self) -> bool:
        """True when a subject pointer names the one live secret.

        Secret-keyed records cannot be overwritten by a new issue (each
        token is its own key), so ``invite:{email}`` holds the current
        token and older tokens for the same email stop validating.
        Signature links are issued elsewhere and carry no pointer.
        """
        return self is VerificationNamespace.INVITE
