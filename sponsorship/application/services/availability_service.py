"""Availability snapshot: cached read path over the elements table.

One cache entry (CACHE_KEY_ELEMENTS) holds the snapshot. A miss rebuilds it
from the store, purging reservations older than the expiration window on the
way. ElementRepository clears the entry after every committed write.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timedelta

from sponsorship.application.dtos.element import AvailabilitySnapshot
from sponsorship.application.interfaces import ICacheService, IElementRepository
from sponsorship.core.constants import CACHE_KEY_ELEMENTS
from sponsorship.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)


class AvailabilityService:
    """Serves the availability snapshot from cache, rebuilding on miss.

    Concurrent misses each rebuild; the last cache write wins.
    """

    def __init__(
        self,
        element_repo: IElementRepository,
        cache: ICacheService,
        *,
        ttl_seconds: int,
        reservation_expiration: timedelta,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._element_repo = element_repo
        self._cache = cache
        self._ttl = ttl_seconds
        self._expiration = reservation_expiration
        self._clock = clock

    async def get_snapshot(self) -> AvailabilitySnapshot:
        cached = await self._cache.get(CACHE_KEY_ELEMENTS)
        if cached is not None:
            return AvailabilitySnapshot.from_dict(cached)
        return await self.rebuild()

    async def rebuild(self) -> AvailabilitySnapshot:
        """Scan all elements, purge expired reservations, and cache the result.

        Store errors propagate (StoreException); nothing is cached then.
        """
        cutoff = self._clock() - self._expiration
        taken: dict[str, str] = {}
        reserved: list[str] = []
        expired: list[str] = []
        for element in await self._element_repo.list_all():
            if element.reservation is None:
                taken[element.mid] = element.name
            elif element.reservation < cutoff:
                expired.append(element.mid)
            else:
                reserved.append(element.mid)
        if expired:
            await self._element_repo.delete_many(expired)
            await self._element_repo.commit()
            logger.debug("Expired reservations purged: %s", expired)
        snapshot = AvailabilitySnapshot(taken=taken, reserved=reserved)
        await self._cache.set(CACHE_KEY_ELEMENTS, snapshot.to_dict(), ttl=self._ttl)
        return snapshot

    async def invalidate(self) -> None:
        await self._cache.delete(CACHE_KEY_ELEMENTS)
