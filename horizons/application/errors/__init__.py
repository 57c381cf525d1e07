"""Application errors package."""

from horizons.application.errors.application_error import (
    ApplicationError,
    ApplicationErrorCode,
    from_domain_error,
    validation_failed,
    verification_failed,
)

__all__ = [
    "ApplicationError",
    "ApplicationErrorCode",
    "from_domain_error",
    "validation_failed",
    "verification_failed",
]
