"""Logging adapters (structlog)."""

from horizons.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
