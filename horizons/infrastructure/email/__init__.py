"""Email service implementations.

- TemplatedEmailService: renders jinja2 templates, implements EmailProtocol
- StubEmailTransport: logs messages instead of sending (development/testing)
- HttpEmailTransport: posts to a transactional mail API (production)
"""

from horizons.infrastructure.email.http_transport import HttpEmailTransport
from horizons.infrastructure.email.stub_transport import StubEmailTransport
from horizons.infrastructure.email.templated_email_service import (
    EmailTransport,
    TemplatedEmailService,
)

__all__ = [
    "EmailTransport",
    "HttpEmailTransport",
    "StubEmailTransport",
    "TemplatedEmailService",
]
