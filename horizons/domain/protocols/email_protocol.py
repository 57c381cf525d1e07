"""EmailProtocol - port for outbound transactional mail.

Every send returns a Result the calling flow must inspect: password reset
and email change undo the just-issued record on a confirmed failure, the
invite flow logs and carries on.
"""

from dataclasses import dataclass
from typing import Protocol

from horizons.core.result import Result
from horizons.domain.errors import EmailDeliveryError


@dataclass(frozen=True, slots=True, kw_only=True)
class EmailReceipt:
    """Proof the mail provider accepted a message.

    Attributes:
        to_email: Recipient.
        subject: Subject line sent.
        provider_message_id: Provider reference, if the provider returned one.
    """

    to_email: str
    subject: str
    provider_message_id: str | None = None


class EmailProtocol(Protocol):
    """Email service protocol (port)."""

    async def send(
        self, *, to_email: str, subject: str, html_body: str
    ) -> Result[EmailReceipt, EmailDeliveryError]:
        """Send a raw HTML message and wait for the provider's answer."""
        ...

    async def send_password_reset_code(
        self, *, to_email: str, code: str, ttl_minutes: int
    ) -> Result[EmailReceipt, EmailDeliveryError]:
        """Send the 6-digit password reset code."""
        ...

    async def send_invitation(
        self, *, to_email: str, name: str, role: str, invite_url: str, ttl_hours: int
    ) -> Result[EmailReceipt, EmailDeliveryError]:
        """Send the account invitation link."""
        ...

    async def send_email_change_code(
        self, *, to_email: str, code: str, ttl_minutes: int
    ) -> Result[EmailReceipt, EmailDeliveryError]:
        """Send the email change code to the *new* address."""
        ...
