"""Integration tests for RedisAdapter against fakeredis.

Tests cover:
- get/set/delete round trips and TTL handling
- Lazy, idempotent connect and retry after a failed attempt
- Error mapping to CacheError
"""

import asyncio
from unittest.mock import AsyncMock, patch

import pytest
from fakeredis import aioredis as fake_aioredis
from redis.exceptions import ConnectionError as RedisConnectionError

from horizons.core.enums import ErrorCode
from horizons.core.result import Failure, Success
from horizons.infrastructure.cache import RedisAdapter
from horizons.infrastructure.enums import InfrastructureErrorCode


def create_unreachable_client() -> AsyncMock:
    client = AsyncMock()
    client.ping.side_effect = RedisConnectionError("Connection refused")
    return client


@pytest.mark.integration
class TestRedisAdapterOperations:
    async def test_set_then_get(self, cache):
        await cache.set("pwdreset:jane@x.com", "123456", ttl=900)

        result = await cache.get("pwdreset:jane@x.com")

        assert result == Success(value="123456")

    async def test_get_missing_key_is_none(self, cache):
        assert await cache.get("invite:missing") == Success(value=None)

    async def test_set_applies_ttl(self, cache, fake_redis):
        await cache.set("invite:tok", "jane@x.com", ttl=172_800)

        ttl = await fake_redis.ttl("invite:tok")

        assert 172_790 <= ttl <= 172_800

    async def test_set_overwrites_value_and_restarts_ttl(self, cache, fake_redis):
        await cache.set("pwdreset:jane@x.com", "111111", ttl=10)
        await cache.set("pwdreset:jane@x.com", "222222", ttl=900)

        assert await cache.get("pwdreset:jane@x.com") == Success(value="222222")
        assert await fake_redis.ttl("pwdreset:jane@x.com") > 10

    async def test_set_without_ttl_persists(self, cache, fake_redis):
        await cache.set("k", "v")

        assert await fake_redis.ttl("k") == -1

    async def test_delete_reports_existence(self, cache):
        await cache.set("k", "v", ttl=60)

        assert await cache.delete("k") == Success(value=True)
        assert await cache.delete("k") == Success(value=False)

    async def test_ping(self, cache):
        assert await cache.ping() == Success(value=True)

    async def test_operation_error_maps_to_cache_error(self, cache, fake_redis):
        with patch.object(fake_redis, "get", AsyncMock(side_effect=RedisConnectionError("reset"))):
            result = await cache.get("k")

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.CACHE_UNAVAILABLE
        assert result.error.infrastructure_code is InfrastructureErrorCode.CACHE_GET_ERROR


@pytest.mark.integration
class TestRedisAdapterConnection:
    def test_requires_url_or_client(self):
        with pytest.raises(ValueError):
            RedisAdapter()

    def test_not_connected_before_first_use(self):
        adapter = RedisAdapter(redis_url="redis://localhost:6379/0")

        assert adapter.is_connected is False

    async def test_failed_connect_then_retry(self):
        adapter = RedisAdapter(redis_url="redis://localhost:6379/0")
        healthy = fake_aioredis.FakeRedis()

        with patch.object(
            RedisAdapter,
            "_build_client",
            side_effect=[create_unreachable_client(), healthy],
        ):
            first = await adapter.get("k")
            assert isinstance(first, Failure)
            assert first.error.infrastructure_code is InfrastructureErrorCode.CACHE_CONNECTION_ERROR
            assert adapter.is_connected is False

            second = await adapter.get("k")

        assert second == Success(value=None)
        assert adapter.is_connected is True
        await adapter.close()

    async def test_concurrent_first_use_connects_once(self):
        adapter = RedisAdapter(redis_url="redis://localhost:6379/0")

        with patch.object(
            RedisAdapter, "_build_client", return_value=fake_aioredis.FakeRedis()
        ) as mock_build:
            results = await asyncio.gather(*(adapter.ping() for _ in range(10)))

        assert all(result == Success(value=True) for result in results)
        mock_build.assert_called_once()
        await adapter.close()

    async def test_close_disconnects(self):
        adapter = RedisAdapter(redis_url="redis://localhost:6379/0")
        with patch.object(RedisAdapter, "_build_client", return_value=fake_aioredis.FakeRedis()):
            await adapter.ping()

        await adapter.close()

        assert adapter.is_connected is False

    async def test_closed_injected_client_reports_unavailable(self):
        adapter = RedisAdapter(redis_client=fake_aioredis.FakeRedis())
        await adapter.close()

        result = await adapter.get("k")

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.CACHE_UNAVAILABLE
        assert result.error.infrastructure_code is InfrastructureErrorCode.CACHE_CONNECTION_ERROR
        assert adapter.is_connected is False
