"""Key-value store protocol.

The verification subsystem needs only four primitives from the store:
connect, get, set-with-expiry and delete. Every operation connects on demand,
so callers never have to call ``connect`` first.

Architecture:
- Protocol-based (structural typing)
- All operations return Result types
- Failures are infrastructure errors: retryable, never "not found"
"""

from typing import Any, Protocol

from horizons.core.errors import DomainError
from horizons.core.result import Result


class CacheProtocol(Protocol):
    """What the domain needs from the key-value store."""

    async def connect(self) -> Result[Any, DomainError]:
        """Establish the connection, or reuse the existing one.

        Idempotent and safe to call concurrently.

        Returns:
            Result with the ready client handle, or CacheError.
        """
        ...

    async def get(self, key: str) -> Result[str | None, DomainError]:
        """Get a value.

        Returns:
            Success(value), Success(None) when the key is absent or expired,
            or Failure(CacheError).
        """
        ...

    async def set(self, key: str, value: str, ttl: int | None = None) -> Result[None, DomainError]:
        """Store a value, overwriting any existing one.

        Args:
            key: Cache key.
            value: String value.
            ttl: Time to live in seconds (None = no expiration).
        """
        ...

    async def delete(self, key: str) -> Result[bool, DomainError]:
        """Delete a key.

        Returns:
            Success(True) if removed, Success(False) if it did not exist.
        """
        ...

    async def ping(self) -> Result[bool, DomainError]:
        """Health check."""
        ...
