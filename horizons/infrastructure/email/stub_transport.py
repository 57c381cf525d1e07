"""Stub mail transport (development/testing).

Logs the envelope instead of sending. Message bodies are not logged since
they contain verification codes.
"""

from horizons.core.result import Result, Success
from horizons.domain.errors import EmailDeliveryError
from horizons.domain.protocols import EmailReceipt, LoggerProtocol
from horizons.domain.validators import mask_email


class StubEmailTransport:
    """Always succeeds; records sent envelopes in ``outbox`` for inspection."""

    def __init__(self, *, logger: LoggerProtocol) -> None:
        self._logger = logger
        self.outbox: list[EmailReceipt] = []

    async def send(
        self, *, to_email: str, subject: str, html_body: str
    ) -> Result[EmailReceipt, EmailDeliveryError]:
        receipt = EmailReceipt(to_email=to_email, subject=subject)
        self.outbox.append(receipt)
        self._logger.info(
            "email_stub_sent",
            to_email=mask_email(to_email),
            subject=subject,
            body_length=len(html_body),
        )
        return Success(value=receipt)
