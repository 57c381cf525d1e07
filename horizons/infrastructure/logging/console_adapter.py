"""Console logging adapter.

Outputs structured logs to stdout using structlog.
- Development: human-readable console renderer with colors
- Testing/CI/Production: JSON renderer for log shipping

A redaction processor runs before rendering: context keys that carry
verification secrets or credentials are replaced, so a careless call site
cannot leak a code or token into the logs.

Implementation does NOT inherit from LoggerProtocol (PEP 544 structural
subtyping).
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from horizons.core.errors import DomainError

REDACTED = "[REDACTED]"

_SECRET_KEYS = frozenset(
    {
        "code",
        "token",
        "password",
        "new_password",
        "access_token",
        "refresh_token",
        "authorization",
        "service_role_key",
    }
)


def redact_secrets(
    _logger: Any, _method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """structlog processor replacing secret-bearing context values."""
    for key in event_dict.keys() & _SECRET_KEYS:
        event_dict[key] = REDACTED
    return event_dict


def _error_context(error: Exception | DomainError, context: dict[str, Any]) -> None:
    context["error_type"] = type(error).__name__
    if isinstance(error, DomainError):
        context["error_code"] = error.code.value
        context["error_message"] = error.message
    else:
        context["error_message"] = str(error)


class ConsoleAdapter:
    """Console logger used in every environment.

    Args:
        use_json: JSON output when True (CI/testing/production),
            human-readable when False (development).
        level: Minimum level name (``"INFO"``, ``"DEBUG"``...).
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        processors: list[structlog.types.Processor] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            redact_secrets,
        ]

        if use_json:
            processors.append(structlog.processors.JSONRenderer())
        else:
            processors.append(structlog.dev.ConsoleRenderer(colors=True))

        structlog.configure(
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(
                logging.getLevelNamesMapping().get(level.upper(), logging.INFO)
            ),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )

        self._logger = structlog.get_logger()

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | DomainError | None = None, **context: Any
    ) -> None:
        """Log an error message with optional error details.

        Args:
            message: Event name.
            error: Exception or DomainError; adds error_type, error_message
                and, for DomainError, error_code.
            **context: Structured key-value context.
        """
        if error is not None:
            _error_context(error, context)
        self._logger.error(message, **context)

    def critical(
        self, message: str, /, *, error: Exception | DomainError | None = None, **context: Any
    ) -> None:
        if error is not None:
            _error_context(error, context)
        self._logger.critical(message, **context)

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a new adapter with ``context`` bound to every entry."""
        bound_adapter = ConsoleAdapter.__new__(ConsoleAdapter)
        bound_adapter._logger = self._logger.bind(**context)
        return bound_adapter
