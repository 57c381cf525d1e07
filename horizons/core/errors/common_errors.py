"""Common error classes used across all layers.

Error Types:
- ValidationError: malformed or missing input
- NotFoundError: referenced resource missing
- ConflictError: request conflicts with current state (e.g. unchanged email)
- AuthenticationError: missing or invalid credentials
- AuthorizationError: authenticated but not allowed
"""

from dataclasses import dataclass

from horizons.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (Profile, Account).
        resource_id: Identifier that was looked up.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict.

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field that conflicts (email, ...).
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (bad credentials, invalid bearer token)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authorization failure.

    Attributes:
        required_role: Role the operation requires.
    """

    required_role: str | None = None
