"""Cache infrastructure package.

- RedisAdapter: lazily connected Redis implementation of CacheProtocol
- CacheKeys: verification key construction
"""

from horizons.infrastructure.cache.cache_keys import CacheKeys
from horizons.infrastructure.cache.redis_adapter import RedisAdapter

__all__ = ["CacheKeys", "RedisAdapter"]
