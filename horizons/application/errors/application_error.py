"""Application layer error types.

Application errors wrap domain errors with the outcome category the
presentation layer maps to an HTTP status.

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
    from_domain_error: Classify a collaborator or domain failure
    validation_failed / verification_failed: Common constructors
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from horizons.core.enums import ErrorCode
from horizons.core.errors import DomainError, ValidationError
from horizons.domain.enums import VerificationNamespace
from horizons.domain.errors import VerificationError


class ApplicationErrorCode(Enum):
    """Application-level error codes.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.CONFLICT,
        ...     message="New email is identical to the current one",
        ... )
    """

    COMMAND_VALIDATION_FAILED = "command_validation_failed"
    COMMAND_EXECUTION_FAILED = "command_execution_failed"
    VERIFICATION_FAILED = "verification_failed"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    EXTERNAL_SERVICE_ERROR = "external_service_error"
    SERVICE_UNAVAILABLE = "service_unavailable"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        code: Application error code (from ApplicationErrorCode enum)
        message: Human-readable error message, safe to show to API clients
        domain_error: Original domain error (if error originated below)
        details: Additional context as key-value pairs
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, Any] | None = None


_UNAVAILABLE = frozenset(
    {
        ErrorCode.CACHE_UNAVAILABLE,
        ErrorCode.AUTH_PROVIDER_UNAVAILABLE,
        ErrorCode.PROFILE_STORE_UNAVAILABLE,
    }
)

_UPSTREAM_REJECTED = frozenset(
    {
        ErrorCode.AUTH_PROVIDER_REJECTED,
        ErrorCode.PROFILE_STORE_REJECTED,
        ErrorCode.EMAIL_DELIVERY_FAILED,
    }
)

_UNAVAILABLE_MESSAGE = "Service temporarily unavailable, please retry."


def from_domain_error(error: DomainError, message: str | None = None) -> ApplicationError:
    """Wrap a domain or collaborator error in its application category.

    Collaborator outages become SERVICE_UNAVAILABLE (retryable), upstream
    rejections become EXTERNAL_SERVICE_ERROR. The client-facing message of
    collaborator failures never echoes upstream text.
    """
    if error.code in _UNAVAILABLE:
        code = ApplicationErrorCode.SERVICE_UNAVAILABLE
        message = message or _UNAVAILABLE_MESSAGE
    elif error.code in _UPSTREAM_REJECTED:
        code = ApplicationErrorCode.EXTERNAL_SERVICE_ERROR
        message = message or "Upstream service rejected the request."
    elif error.code is ErrorCode.VERIFICATION_INVALID_OR_EXPIRED:
        code = ApplicationErrorCode.VERIFICATION_FAILED
    elif error.code in (ErrorCode.USER_NOT_FOUND, ErrorCode.PROFILE_NOT_FOUND):
        code = ApplicationErrorCode.NOT_FOUND
    elif error.code in (ErrorCode.EMAIL_UNCHANGED, ErrorCode.EMAIL_ALREADY_EXISTS):
        code = ApplicationErrorCode.CONFLICT
    elif error.code in (ErrorCode.TOKEN_INVALID, ErrorCode.INVALID_CREDENTIALS):
        code = ApplicationErrorCode.UNAUTHORIZED
    elif error.code in (ErrorCode.PERMISSION_DENIED, ErrorCode.ACCOUNT_INACTIVE):
        code = ApplicationErrorCode.FORBIDDEN
    elif isinstance(error, ValidationError):
        code = ApplicationErrorCode.COMMAND_VALIDATION_FAILED
    else:
        code = ApplicationErrorCode.COMMAND_EXECUTION_FAILED
    return ApplicationError(code=code, message=message or error.message, domain_error=error)


def validation_failed(
    message: str, *, field: str | None = None, code: ErrorCode = ErrorCode.VALIDATION_FAILED
) -> ApplicationError:
    return ApplicationError(
        code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
        message=message,
        domain_error=ValidationError(code=code, message=message, field=field),
        details={"field": field} if field else None,
    )


def verification_failed(namespace: VerificationNamespace) -> ApplicationError:
    """The single, reason-free failure of a flow's verification step."""
    error = VerificationError.for_namespace(namespace)
    return ApplicationError(
        code=ApplicationErrorCode.VERIFICATION_FAILED,
        message=error.message,
        domain_error=error,
    )
