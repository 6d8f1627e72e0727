"""Cache backends for the availability snapshot.

MemoryCacheService (in-process, default) and CacheService (Redis) both
implement CacheProtocol; build_cache() picks one from settings.cache_backend.
"""

from sponsorship.infrastructure.cache.cache_protocol import CacheProtocol
from sponsorship.infrastructure.cache.memory_cache import MemoryCacheService
from sponsorship.infrastructure.cache.redis_cache import CacheService, build_cache

__all__ = [
    "CacheProtocol",
    "CacheService",
    "MemoryCacheService",
    "build_cache",
]
