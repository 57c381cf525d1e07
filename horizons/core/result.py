"""Result types for railway-oriented programming.

Handlers, adapters and services return ``Success`` or ``Failure`` instead of
raising. Callers branch with structural pattern matching, which keeps every
failure path (store down, mail rejected, code mismatch) visible at the call
site.

Usage:
    result = await cache.get("pwdreset:jane@example.com")
    match result:
        case Success(value=None):
            ...  # absent or expired
        case Success(value=code):
            ...
        case Failure(error=error):
            ...  # infrastructure failure, retryable
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome.

    Attributes:
        value: The produced value (may legitimately be None, e.g. a cache miss).
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome.

    Attributes:
        error: The error describing what went wrong.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
