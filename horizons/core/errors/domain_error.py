"""Base error class for Railway-Oriented Programming.

DomainError is the root of every error that flows through a Failure. It does
not inherit from Exception: errors are returned, never raised.
"""

from dataclasses import dataclass
from typing import Any

from horizons.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code.
        message: Human-readable error message.
        details: Optional context for logs (never shown to API clients).
    """

    code: ErrorCode
    message: str
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
