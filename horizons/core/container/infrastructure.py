"""Infrastructure dependency factories.

Application-scoped singletons:
- Cache (Redis, lazily connected)
- Token codec
- Logging (structlog console adapter)
- Email (stub/HTTP transport)
- Supabase auth admin client and profile repository
- Verification session manager

Usage:
    # Application code
    cache = get_cache()

    # Presentation layer
    cache: CacheProtocol = Depends(get_cache)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from horizons.core.config import get_settings

if TYPE_CHECKING:
    from horizons.application.services import VerificationSessionManager
    from horizons.domain.protocols import (
        AuthProviderProtocol,
        EmailProtocol,
        LoggerProtocol,
        ProfileRepository,
        TokenCodecProtocol,
    )
    from horizons.infrastructure.cache import RedisAdapter


@lru_cache()
def get_cache() -> "RedisAdapter":
    """Get cache client singleton (app-scoped).

    The adapter connects on first use; building it never touches Redis, so
    the application starts even when Redis is briefly unavailable.
    """
    from horizons.infrastructure.cache import RedisAdapter

    return RedisAdapter(redis_url=get_settings().redis_url)


@lru_cache()
def get_token_codec() -> "TokenCodecProtocol":
    from horizons.infrastructure.security import TokenCodec

    return TokenCodec()


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Get logger singleton (app-scoped).

    Human-readable console output in development, JSON elsewhere.
    """
    from horizons.infrastructure.logging import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(use_json=settings.use_json_logs, level=settings.log_level)


@lru_cache()
def get_email_service() -> "EmailProtocol":
    """Get email service singleton (app-scoped).

    Returns the templated service over the transport selected by
    EMAIL_BACKEND:
        - 'stub': StubEmailTransport (logs, development/testing)
        - 'http': HttpEmailTransport (production mail API)
    """
    from horizons.infrastructure.email import (
        HttpEmailTransport,
        StubEmailTransport,
        TemplatedEmailService,
    )

    settings = get_settings()
    logger = get_logger()
    if settings.email_backend == "http":
        transport: HttpEmailTransport | StubEmailTransport = HttpEmailTransport(
            api_url=settings.email_api_url,
            api_token=settings.email_api_token,
            from_address=settings.email_from_address,
            from_name=settings.email_from_name,
            logger=logger,
            timeout=settings.http_timeout_seconds,
        )
    else:
        transport = StubEmailTransport(logger=logger)
    return TemplatedEmailService(transport=transport, app_name=settings.email_from_name)


@lru_cache()
def get_auth_provider() -> "AuthProviderProtocol":
    from horizons.infrastructure.supabase import SupabaseAuthAdminClient

    settings = get_settings()
    return SupabaseAuthAdminClient(
        base_url=settings.supabase_url,
        service_role_key=settings.supabase_service_role_key,
        logger=get_logger(),
        timeout=settings.http_timeout_seconds,
    )


@lru_cache()
def get_profile_repository() -> "ProfileRepository":
    from horizons.infrastructure.supabase import SupabaseProfileRepository

    settings = get_settings()
    return SupabaseProfileRepository(
        base_url=settings.supabase_url,
        service_role_key=settings.supabase_service_role_key,
        logger=get_logger(),
        timeout=settings.http_timeout_seconds,
    )


@lru_cache()
def get_verification_session_manager() -> "VerificationSessionManager":
    from horizons.application.services import VerificationSessionManager

    return VerificationSessionManager(
        cache=get_cache(), codec=get_token_codec(), logger=get_logger()
    )
