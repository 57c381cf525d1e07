"""Errors returned by the external collaborator ports.

Attributes shared by all three:
    is_transient: The collaborator was unreachable or timed out; retrying
        may succeed (maps to 5xx).
"""

from dataclasses import dataclass

from horizons.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthProviderError(DomainError):
    """Authentication provider call failed.

    Attributes:
        status_code: Upstream HTTP status, when one was received.
        is_transient: True for connectivity failures and upstream 5xx.
    """

    status_code: int | None = None
    is_transient: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class ProfileStoreError(DomainError):
    """Relational profile store call failed."""

    status_code: int | None = None
    is_transient: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class EmailDeliveryError(DomainError):
    """Mail could not be handed to the mail provider.

    Attributes:
        is_ambiguous: The request may have been delivered (timeout while
            waiting for the answer). Flows keep just-issued records on
            ambiguous failures and delete them on confirmed ones.
    """

    is_ambiguous: bool = False
