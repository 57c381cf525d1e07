"""Unit tests for ConsoleAdapter and the secret redaction processor."""

from unittest.mock import MagicMock, patch

import pytest

from horizons.core.enums import ErrorCode
from horizons.domain.errors import EmailDeliveryError
from horizons.infrastructure.logging import ConsoleAdapter
from horizons.infrastructure.logging.console_adapter import REDACTED, redact_secrets


@pytest.fixture
def mock_structlog():
    with patch("horizons.infrastructure.logging.console_adapter.structlog") as mock:
        mock.get_logger.return_value = MagicMock()
        yield mock


@pytest.mark.unit
class TestRedactSecrets:
    def test_secret_keys_are_replaced(self):
        event = {
            "event": "password_reset_code_sent",
            "code": "123456",
            "token": "abc",
            "new_password": "Secr3t!",
            "email": "j***@x.com",
        }

        result = redact_secrets(None, "info", event)

        assert result["code"] == REDACTED
        assert result["token"] == REDACTED
        assert result["new_password"] == REDACTED
        assert result["email"] == "j***@x.com"
        assert result["event"] == "password_reset_code_sent"

    def test_token_prefix_is_kept(self):
        result = redact_secrets(None, "info", {"token_prefix": "abcdefgh..."})

        assert result["token_prefix"] == "abcdefgh..."


@pytest.mark.unit
class TestConsoleAdapter:
    def test_configures_json_renderer(self, mock_structlog):
        ConsoleAdapter(use_json=True)

        processors = mock_structlog.configure.call_args.kwargs["processors"]
        assert redact_secrets in processors
        assert processors[-1] is mock_structlog.processors.JSONRenderer.return_value

    def test_configures_console_renderer(self, mock_structlog):
        ConsoleAdapter(use_json=False)

        processors = mock_structlog.configure.call_args.kwargs["processors"]
        assert processors[-1] is mock_structlog.dev.ConsoleRenderer.return_value

    def test_error_adds_domain_error_context(self, mock_structlog):
        adapter = ConsoleAdapter()
        error = EmailDeliveryError(code=ErrorCode.EMAIL_DELIVERY_FAILED, message="rejected")

        adapter.error("password_reset_email_failed", error=error, email="j***@x.com")

        mock_structlog.get_logger.return_value.error.assert_called_once_with(
            "password_reset_email_failed",
            email="j***@x.com",
            error_type="EmailDeliveryError",
            error_code="email_delivery_failed",
            error_message="rejected",
        )

    def test_critical_adds_exception_context(self, mock_structlog):
        adapter = ConsoleAdapter()

        adapter.critical("boom", error=RuntimeError("disk full"))

        mock_structlog.get_logger.return_value.critical.assert_called_once_with(
            "boom", error_type="RuntimeError", error_message="disk full"
        )

    def test_bind_returns_adapter_with_bound_logger(self, mock_structlog):
        adapter = ConsoleAdapter()
        bound_logger = MagicMock()
        mock_structlog.get_logger.return_value.bind.return_value = bound_logger

        bound = adapter.bind(request_id="r-1")
        bound.info("hello", extra=1)

        assert isinstance(bound, ConsoleAdapter)
        bound_logger.info.assert_called_once_with("hello", extra=1)
