"""Centralized constants for internal implementation details.

Environment-specific values (TTLs, URLs, credentials) live in
``horizons/core/config.py``; these are fixed properties of the protocols.
"""

# =============================================================================
# Verification secrets
# =============================================================================

OPAQUE_TOKEN_BYTES: int = 32
"""Entropy of invite / signature-link tokens (32 bytes = 256 bits)."""

NUMERIC_CODE_LENGTH: int = 6
"""Number of digits in human-typed verification codes."""

PASSWORD_RESET_CODE_TTL_DEFAULT: int = 15 * 60
"""Password reset code lifetime in seconds."""

INVITE_TOKEN_TTL_DEFAULT: int = 48 * 60 * 60
"""Invitation link lifetime in seconds."""

EMAIL_CHANGE_CODE_TTL_DEFAULT: int = 15 * 60
"""Email change code lifetime in seconds."""

# =============================================================================
# Accounts
# =============================================================================

VALID_ROLES: frozenset[str] = frozenset({"admin", "consultant", "manager"})
"""Roles an administrator may assign (compared lowercase)."""

ADMIN_ROLE: str = "admin"

PASSWORD_MIN_LENGTH: int = 6
"""Minimum password length accepted by the authentication provider."""

# =============================================================================
# Timeouts and limits
# =============================================================================

HTTP_TIMEOUT_DEFAULT: float = 10.0
"""Default timeout for Supabase and mail API calls in seconds."""

REDIS_SOCKET_TIMEOUT: float = 5.0
"""Socket connect/read timeout for Redis in seconds."""

REDIS_MAX_CONNECTIONS: int = 50

RESPONSE_BODY_MAX_LENGTH: int = 500
"""Maximum length of upstream response bodies copied into error details."""

TOKEN_LOG_PREFIX_LENGTH: int = 8
"""Characters of a token kept when it appears in logs."""

BEARER_PREFIX: str = "Bearer "
