"""LoggerProtocol definition for structured logging.

Implementations MUST emit structured logs (message + key-value context) and
MUST NOT receive secrets: verification codes, tokens and passwords are never
passed as context. Emails are masked with ``mask_email`` and tokens are
truncated with ``truncate_token`` before logging.

Usage:
    from horizons.core.container import get_logger

    logger = get_logger()
    logger.info("password_reset_code_issued", email=mask_email(email))
"""

from __future__ import annotations

from typing import Any, Protocol

from horizons.core.errors import DomainError


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | DomainError | None = None, **context: Any
    ) -> None:
        """Log an error-level message.

        Args:
            message: Event name.
            error: Optional exception or DomainError; adapters add
                error_type/error_message (and error_code for DomainError).
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | DomainError | None = None, **context: Any
    ) -> None:
        """Log a critical message.

        Used when the system is left inconsistent and needs a human, e.g. an
        email change whose auth-side rollback failed.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a new logger with ``context`` included in every entry."""
        ...
