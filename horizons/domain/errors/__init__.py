"""Domain errors package.

Errors that are part of port contracts live here so the application layer
can match on them without importing infrastructure.
"""

from horizons.domain.errors.collaborator_errors import (
    AuthProviderError,
    EmailDeliveryError,
    ProfileStoreError,
)
from horizons.domain.errors.verification_error import VerificationError

__all__ = [
    "AuthProviderError",
    "EmailDeliveryError",
    "ProfileStoreError",
    "VerificationError",
]
