"""Container module - Centralized dependency injection.

    from horizons.core.container import get_cache, get_logger, ...

The container is organized into modules:
- infrastructure: app-scoped adapters (cache, codec, logging, email, Supabase)
- handlers: verification handler factories
"""

from horizons.core.container.handlers import (
    get_complete_email_change_handler,
    get_complete_invite_handler,
    get_complete_password_reset_handler,
    get_invite_user_handler,
    get_request_email_change_handler,
    get_request_password_reset_handler,
    get_resolve_signature_link_handler,
    get_verify_password_reset_code_handler,
)
from horizons.core.container.infrastructure import (
    get_auth_provider,
    get_cache,
    get_email_service,
    get_logger,
    get_profile_repository,
    get_token_codec,
    get_verification_session_manager,
)

__all__ = [
    # Infrastructure
    "get_auth_provider",
    "get_cache",
    "get_email_service",
    "get_logger",
    "get_profile_repository",
    "get_token_codec",
    "get_verification_session_manager",
    # Handlers
    "get_complete_email_change_handler",
    "get_complete_invite_handler",
    "get_complete_password_reset_handler",
    "get_invite_user_handler",
    "get_request_email_change_handler",
    "get_request_password_reset_handler",
    "get_resolve_signature_link_handler",
    "get_verify_password_reset_code_handler",
]
