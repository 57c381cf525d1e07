"""Redis adapter implementing CacheProtocol.

The adapter owns a lazily established connection: nothing touches the
network until the first operation (or an explicit ``connect``). Once
connected the client, and its pool, is reused by every caller. A failed
connection attempt leaves the adapter disconnected, so the next operation
tries again; broken pooled connections are re-dialed by redis-py itself.

Architecture:
- Implements CacheProtocol without inheritance (structural typing)
- Maps Redis exceptions to CacheError
- Returns Result types for all operations
- Constructed by the container (composition root), never a module global
"""

import asyncio

from redis.asyncio import ConnectionPool, Redis
from redis.exceptions import RedisError

from horizons.core.constants import REDIS_MAX_CONNECTIONS, REDIS_SOCKET_TIMEOUT
from horizons.core.enums import ErrorCode
from horizons.core.result import Failure, Result, Success
from horizons.infrastructure.enums import InfrastructureErrorCode
from horizons.infrastructure.errors import CacheError


def _cache_error(
    infrastructure_code: InfrastructureErrorCode,
    message: str,
    exc: Exception,
    **details: object,
) -> CacheError:
    return CacheError(
        code=ErrorCode.CACHE_UNAVAILABLE,
        infrastructure_code=infrastructure_code,
        message=message,
        details={**details, "error": str(exc), "type": type(exc).__name__},
    )


class RedisAdapter:
    """Redis implementation of CacheProtocol.

    Either a URL (production: the adapter builds its pool on first use) or a
    ready client (tests: ``fakeredis.aioredis.FakeRedis``) must be given.

    Attributes:
        _redis_url: Connection URL used for lazy connection.
        _redis: Connected client, or None until the first successful connect.
        _connect_lock: Serializes the first connection attempt.
    """

    def __init__(
        self,
        *,
        redis_url: str | None = None,
        redis_client: Redis | None = None,
        max_connections: int = REDIS_MAX_CONNECTIONS,
    ) -> None:
        """Initialize Redis adapter.

        Args:
            redis_url: Redis URL (e.g. ``redis://localhost:6379/0``).
            redis_client: Pre-built async client; skips lazy connection.
            max_connections: Pool size when building from a URL.

        Raises:
            ValueError: If neither ``redis_url`` nor ``redis_client`` is given.
        """
        if redis_url is None and redis_client is None:
            raise ValueError("RedisAdapter needs a redis_url or a redis_client")
        self._redis_url = redis_url
        self._redis = redis_client
        self._max_connections = max_connections
        self._connect_lock = asyncio.Lock()

    @property
    def is_connected(self) -> bool:
        return self._redis is not None

    def _build_client(self, redis_url: str) -> Redis:
        pool = ConnectionPool.from_url(
            redis_url,
            max_connections=self._max_connections,
            decode_responses=False,
            socket_connect_timeout=REDIS_SOCKET_TIMEOUT,
            socket_timeout=REDIS_SOCKET_TIMEOUT,
            retry_on_timeout=True,
            socket_keepalive=True,
        )
        return Redis(connection_pool=pool)

    async def connect(self) -> Result[Redis, CacheError]:
        """Establish the connection on first call; reuse it afterwards.

        Returns:
            Result with the connected client, or CacheError.
        """
        if self._redis is not None:
            return Success(value=self._redis)

        async with self._connect_lock:
            # Another coroutine may have connected while we waited
            if self._redis is not None:
                return Success(value=self._redis)

            if self._redis_url is None:
                # Injected client was closed; there is nothing to reconnect to
                return Failure(
                    error=CacheError(
                        code=ErrorCode.CACHE_UNAVAILABLE,
                        infrastructure_code=InfrastructureErrorCode.CACHE_CONNECTION_ERROR,
                        message="Redis client is closed and no redis_url is configured",
                    )
                )

            client = self._build_client(self._redis_url)
            try:
                await client.ping()  # type: ignore[misc]
            except (RedisError, OSError) as e:
                await client.aclose()
                return Failure(
                    error=_cache_error(
                        InfrastructureErrorCode.CACHE_CONNECTION_ERROR,
                        "Failed to connect to Redis",
                        e,
                    )
                )
            self._redis = client
            return Success(value=client)

    async def get(self, key: str) -> Result[str | None, CacheError]:
        """Get value from Redis.

        Returns:
            Result with value if found, None if not found, or CacheError.
        """
        match await self.connect():
            case Failure(error=err):
                return Failure(error=err)
            case Success(value=client):
                pass

        try:
            value = await client.get(key)
        except RedisError as e:
            return Failure(
                error=_cache_error(
                    InfrastructureErrorCode.CACHE_GET_ERROR,
                    f"Failed to get key '{key}' from cache",
                    e,
                    key=key,
                )
            )
        if value is None:
            return Success(value=None)
        decoded = value.decode("utf-8") if isinstance(value, bytes) else value
        return Success(value=decoded)

    async def set(
        self,
        key: str,
        value: str,
        ttl: int | None = None,
    ) -> Result[None, CacheError]:
        """Set value in Redis, replacing any existing value and TTL.

        Args:
            key: Cache key.
            value: Value to cache.
            ttl: Time to live in seconds (None = no expiration).
        """
        match await self.connect():
            case Failure(error=err):
                return Failure(error=err)
            case Success(value=client):
                pass

        try:
            if ttl is not None:
                await client.setex(key, ttl, value)
            else:
                await client.set(key, value)
        except RedisError as e:
            return Failure(
                error=_cache_error(
                    InfrastructureErrorCode.CACHE_SET_ERROR,
                    f"Failed to set key '{key}' in cache",
                    e,
                    key=key,
                    ttl=ttl,
                )
            )
        return Success(value=None)

    async def delete(self, key: str) -> Result[bool, CacheError]:
        """Delete key from Redis.

        Returns:
            Result with True if deleted, False if key didn't exist, or CacheError.
        """
        match await self.connect():
            case Failure(error=err):
                return Failure(error=err)
            case Success(value=client):
                pass

        try:
            deleted_count = await client.delete(key)
        except RedisError as e:
            return Failure(
                error=_cache_error(
                    InfrastructureErrorCode.CACHE_DELETE_ERROR,
                    f"Failed to delete key '{key}' from cache",
                    e,
                    key=key,
                )
            )
        return Success(value=deleted_count > 0)

    async def ping(self) -> Result[bool, CacheError]:
        """Check Redis connectivity (health check)."""
        match await self.connect():
            case Failure(error=err):
                return Failure(error=err)
            case Success(value=client):
                pass

        try:
            await client.ping()  # type: ignore[misc]
        except RedisError as e:
            return Failure(
                error=_cache_error(
                    InfrastructureErrorCode.CACHE_CONNECTION_ERROR,
                    "Redis health check failed",
                    e,
                )
            )
        return Success(value=True)

    async def close(self) -> None:
        """Release the connection pool (application shutdown)."""
        if self._redis is not None:
            await self._redis.aclose()
            self._redis = None
