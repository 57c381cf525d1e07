"""Templated email service (EmailProtocol implementation).

Renders the flow-specific messages with jinja2 and hands them to a transport.
The transport's Result is returned untouched: deciding what a failed send
means (rollback or ignore) belongs to the calling flow.
"""

from pathlib import Path
from typing import Protocol

from jinja2 import Environment, FileSystemLoader, select_autoescape

from horizons.core.result import Result
from horizons.domain.errors import EmailDeliveryError
from horizons.domain.protocols import EmailReceipt

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


class EmailTransport(Protocol):
    """Delivers an already rendered message."""

    async def send(
        self, *, to_email: str, subject: str, html_body: str
    ) -> Result[EmailReceipt, EmailDeliveryError]: ...


class TemplatedEmailService:
    """Implements EmailProtocol on top of an EmailTransport."""

    def __init__(
        self,
        *,
        transport: EmailTransport,
        app_name: str = "Horizons",
        template_dir: Path = _DEFAULT_TEMPLATE_DIR,
    ) -> None:
        self._transport = transport
        self._app_name = app_name
        self._jinja = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=select_autoescape(["html", "xml"]),
        )

    def _render(self, template_name: str, **context: object) -> str:
        template = self._jinja.get_template(template_name)
        return template.render(app_name=self._app_name, **context)

    async def send(
        self, *, to_email: str, subject: str, html_body: str
    ) -> Result[EmailReceipt, EmailDeliveryError]:
        return await self._transport.send(
            to_email=to_email, subject=subject, html_body=html_body
        )

    async def send_password_reset_code(
        self, *, to_email: str, code: str, ttl_minutes: int
    ) -> Result[EmailReceipt, EmailDeliveryError]:
        html_body = self._render("password_reset_code.html", code=code, ttl_minutes=ttl_minutes)
        return await self.send(
            to_email=to_email,
            subject=f"Your {self._app_name} password reset code",
            html_body=html_body,
        )

    async def send_invitation(
        self, *, to_email: str, name: str, role: str, invite_url: str, ttl_hours: int
    ) -> Result[EmailReceipt, EmailDeliveryError]:
        html_body = self._render(
            "invitation.html",
            name=name,
            email=to_email,
            role=role,
            invite_url=invite_url,
            ttl_hours=ttl_hours,
        )
        return await self.send(
            to_email=to_email,
            subject=f"Your {self._app_name} account is ready",
            html_body=html_body,
        )

    async def send_email_change_code(
        self, *, to_email: str, code: str, ttl_minutes: int
    ) -> Result[EmailReceipt, EmailDeliveryError]:
        html_body = self._render("email_change_code.html", code=code, ttl_minutes=ttl_minutes)
        return await self.send(
            to_email=to_email,
            subject=f"Confirm your new {self._app_name} email address",
            html_body=html_body,
        )
