"""Unit tests for the infrastructure container.

Factories are lru_cached singletons; caches are cleared around each test
so settings patches take effect.
"""

from unittest.mock import patch

import pytest

from horizons.application.services import VerificationSessionManager
from horizons.core.config import Settings
from horizons.core.container import (
    get_cache,
    get_email_service,
    get_request_password_reset_handler,
    get_verification_session_manager,
    infrastructure,
)
from horizons.infrastructure.cache import RedisAdapter
from horizons.infrastructure.email import HttpEmailTransport, StubEmailTransport

_FACTORIES = (
    infrastructure.get_cache,
    infrastructure.get_token_codec,
    infrastructure.get_logger,
    infrastructure.get_email_service,
    infrastructure.get_auth_provider,
    infrastructure.get_profile_repository,
    infrastructure.get_verification_session_manager,
)


@pytest.fixture(autouse=True)
def clear_container_caches():
    for factory in _FACTORIES:
        factory.cache_clear()
    yield
    for factory in _FACTORIES:
        factory.cache_clear()


def patch_settings(**overrides):
    return patch.object(
        infrastructure, "get_settings", return_value=Settings(_env_file=None, **overrides)
    )


@pytest.mark.unit
class TestInfrastructureContainer:
    def test_cache_is_singleton_and_not_connected(self):
        cache = get_cache()

        assert isinstance(cache, RedisAdapter)
        assert get_cache() is cache
        assert cache.is_connected is False

    def test_stub_email_backend(self):
        with patch_settings(email_backend="stub"):
            service = get_email_service()

        assert isinstance(service._transport, StubEmailTransport)

    def test_http_email_backend(self):
        with patch_settings(email_backend="http", email_api_token="t"):
            service = get_email_service()

        assert isinstance(service._transport, HttpEmailTransport)

    def test_session_manager_shares_cache(self):
        manager = get_verification_session_manager()

        assert isinstance(manager, VerificationSessionManager)
        assert manager._cache is get_cache()


@pytest.mark.unit
def test_handler_factory_uses_configured_ttl():
    with patch(
        "horizons.core.container.handlers.get_settings",
        return_value=Settings(_env_file=None, password_reset_code_ttl_seconds=120),
    ):
        handler = get_request_password_reset_handler()

    assert handler._code_ttl_seconds == 120
