"""Redis-backed cache service.

Stores JSON values with TTL. When Redis is unreachable every call degrades
to a miss / no-op, so the availability snapshot is simply rebuilt from the
database on each request.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import redis.asyncio as redis

from sponsorship.core.config import Settings, get_settings
from sponsorship.infrastructure.cache.cache_protocol import CacheProtocol
from sponsorship.infrastructure.cache.memory_cache import MemoryCacheService

logger = logging.getLogger(__name__)

R = TypeVar("R")

_UNAVAILABLE = object()


class CacheService:
    """Async Redis cache service with TTL support.

    Call connect() at startup and disconnect() at shutdown. A dropped
    connection is re-established once per command before giving up.
    """

    def __init__(
        self, redis_client: redis.Redis | None = None, settings: Settings | None = None
    ) -> None:
        """Initialize cache service.

        Args:
            redis_client: Optional Redis client for testing or DI.
            settings: Connection settings; defaults to get_settings().
        """
        self.redis = redis_client
        self.settings = settings or get_settings()
        self._connected = redis_client is not None

    async def connect(self) -> None:
        """Establish Redis connection."""
        if self.redis is not None:
            return
        password = self.settings.redis_password
        client = redis.Redis(
            host=self.settings.redis_host,
            port=self.settings.redis_port,
            db=self.settings.redis_db,
            password=password.get_secret_value() if password else None,
            decode_responses=True,
            socket_connect_timeout=5,
            socket_keepalive=True,
        )
        try:
            await client.ping()
        except (redis.ConnectionError, redis.TimeoutError) as e:
            logger.warning("Redis connection failed: %s. Cache disabled.", e)
            await client.aclose()
            self._connected = False
            return
        self.redis = client
        self._connected = True
        logger.info(
            "Redis cache connected: %s:%s", self.settings.redis_host, self.settings.redis_port
        )

    async def disconnect(self) -> None:
        if self.redis is not None:
            await self.redis.aclose()
            self.redis = None
            self._connected = False
            logger.info("Redis cache disconnected")

    async def _reconnect(self) -> bool:
        if self.redis is not None:
            try:
                await self.redis.aclose()
            except redis.RedisError:
                logger.debug("Ignoring error while closing stale Redis client")
        self.redis = None
        self._connected = False
        await self.connect()
        return self.is_available()

    def is_available(self) -> bool:
        return self._connected and self.redis is not None

    async def _run(
        self, op: str, key: str, command: Callable[[redis.Redis], Awaitable[R]]
    ) -> R | object:
        """Run command against the client, reconnecting once on connection loss.

        Returns _UNAVAILABLE when Redis could not serve the command.
        """
        if self.redis is None or not self._connected:
            return _UNAVAILABLE
        try:
            return await command(self.redis)
        except (redis.ConnectionError, redis.TimeoutError):
            if not await self._reconnect() or self.redis is None:
                logger.warning("Cache %s unavailable for key %s (Redis disconnected)", op, key)
                return _UNAVAILABLE
            try:
                return await command(self.redis)
            except redis.RedisError:
                logger.exception("Cache %s error for key %s after reconnect", op, key)
                return _UNAVAILABLE
        except redis.RedisError:
            logger.exception("Cache %s error for key %s", op, key)
            return _UNAVAILABLE

    async def get(self, key: str) -> Any | None:
        """Return the JSON-decoded value, or None if missing or unavailable."""
        value = await self._run("get", key, lambda r: r.get(key))
        if value is _UNAVAILABLE or value is None:
            logger.debug("Cache MISS: %s", key)
            return None
        logger.debug("Cache HIT: %s", key)
        return json.loads(value)  # type: ignore[arg-type]

    async def set(self, key: str, value: Any, ttl: int = 300) -> bool:
        """Store value (JSON-serializable) with TTL. Returns True on success."""
        serialized = json.dumps(value)
        if await self._run("set", key, lambda r: r.setex(key, ttl, serialized)) is _UNAVAILABLE:
            return False
        logger.debug("Cache SET: %s (TTL: %ss)", key, ttl)
        return True

    async def delete(self, key: str) -> bool:
        """Remove key. Returns True if the command reached Redis."""
        if await self._run("delete", key, lambda r: r.delete(key)) is _UNAVAILABLE:
            return False
        logger.debug("Cache DELETE: %s", key)
        return True


def build_cache(settings: Settings | None = None) -> CacheProtocol:
    """Return the cache backend selected by settings.cache_backend."""
    settings = settings or get_settings()
    if settings.cache_backend == "redis":
        return CacheService(settings=settings)
    return MemoryCacheService(maxsize=settings.cache_max_entries)
