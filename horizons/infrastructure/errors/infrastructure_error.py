"""Infrastructure layer error types.

Adapters catch library exceptions and return these inside Failure. They
inherit from DomainError so they flow through ``Result[T, DomainError]``.
"""

from dataclasses import dataclass
from typing import Any

from horizons.core.errors import DomainError
from horizons.infrastructure.enums import InfrastructureErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class InfrastructureError(DomainError):
    """Base infrastructure error.

    Attributes:
        infrastructure_code: Adapter-level error code.
        details: Additional context (key, operation, original error).
    """

    infrastructure_code: InfrastructureErrorCode | None = None
    details: dict[str, Any] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class CacheError(InfrastructureError):
    """Redis failure. Always retryable from the caller's point of view."""

    pass
