"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention and travel inside
DomainError instances returned in Failure results.
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    INVALID_EMAIL = "invalid_email"
    INVALID_PASSWORD = "invalid_password"
    INVALID_ROLE = "invalid_role"
    TOKEN_REQUIRED = "token_required"
    VALIDATION_FAILED = "validation_failed"

    # Resource errors
    USER_NOT_FOUND = "user_not_found"
    PROFILE_NOT_FOUND = "profile_not_found"

    # Conflict errors
    EMAIL_UNCHANGED = "email_unchanged"
    EMAIL_ALREADY_EXISTS = "email_already_exists"

    # Authentication / authorization errors
    INVALID_CREDENTIALS = "invalid_credentials"
    TOKEN_INVALID = "token_invalid"
    ACCOUNT_INACTIVE = "account_inactive"
    PERMISSION_DENIED = "permission_denied"

    # Verification errors (one generic reason on purpose)
    VERIFICATION_INVALID_OR_EXPIRED = "verification_invalid_or_expired"

    # External collaborators
    CACHE_UNAVAILABLE = "cache_unavailable"
    AUTH_PROVIDER_UNAVAILABLE = "auth_provider_unavailable"
    AUTH_PROVIDER_REJECTED = "auth_provider_rejected"
    PROFILE_STORE_UNAVAILABLE = "profile_store_unavailable"
    PROFILE_STORE_REJECTED = "profile_store_rejected"
    EMAIL_DELIVERY_FAILED = "email_delivery_failed"
