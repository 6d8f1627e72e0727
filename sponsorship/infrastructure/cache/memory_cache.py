"""In-process TTL cache.

Single-process deployments keep the availability snapshot here. Backed by
cachetools.TLRUCache so every set() can carry its own TTL; expired entries
are dropped on access and on the next write.
"""

from __future__ import annotations

import copy
import logging
import time
from collections.abc import Callable
from typing import Any

from cachetools import TLRUCache

logger = logging.getLogger(__name__)


def _expires_at(key: str, entry: tuple[int, Any], now: float) -> float:
    ttl, _ = entry
    return now + ttl


class MemoryCacheService:
    """TLRUCache-backed cache with per-key expiry.

    Values are deep-copied on set and get so callers never share mutable
    state with the cache. When maxsize is reached the entry closest to
    expiry is evicted.
    """

    def __init__(
        self,
        maxsize: int = 128,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._cache: TLRUCache[str, tuple[int, Any]] = TLRUCache(
            maxsize=maxsize, ttu=_expires_at, timer=clock
        )

    async def connect(self) -> None:
        logger.info("In-memory cache ready (max %s entries)", self._cache.maxsize)

    async def disconnect(self) -> None:
        self._cache.clear()

    def is_available(self) -> bool:
        return True

    async def get(self, key: str) -> Any | None:
        entry = self._cache.get(key)
        if entry is None:
            logger.debug("Cache MISS: %s", key)
            return None
        logger.debug("Cache HIT: %s", key)
        return copy.deepcopy(entry[1])

    async def set(self, key: str, value: Any, ttl: int = 300) -> bool:
        self._cache[key] = (ttl, copy.deepcopy(value))
        logger.debug("Cache SET: %s (TTL: %ss)", key, ttl)
        return True

    async def delete(self, key: str) -> bool:
        if self._cache.pop(key, None) is not None:
            logger.debug("Cache DELETE: %s", key)
        return True

    def size(self) -> int:
        """Number of live entries."""
        self._cache.expire()
        return len(self._cache)
