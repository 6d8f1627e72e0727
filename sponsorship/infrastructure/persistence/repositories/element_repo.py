"""Element repository. Every committed write invalidates the cached availability snapshot."""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from sponsorship.application.dtos.element import (
    ElementKey,
    ElementPatch,
    ElementRecord,
    NewReservation,
    SponsorshipRecord,
)
from sponsorship.core.constants import CACHE_KEY_ELEMENTS, TABLE_ELEMENTS
from sponsorship.domain.exceptions import ElementUnavailableException
from sponsorship.infrastructure.cache.cache_protocol import CacheProtocol
from sponsorship.infrastructure.persistence.models.element import Element
from sponsorship.infrastructure.persistence.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class ElementRepository(BaseRepository):
    """Reads and writes of the elements table."""

    table = TABLE_ELEMENTS

    def __init__(self, db: AsyncSession, cache: CacheProtocol | None = None) -> None:
        super().__init__(db)
        self.cache = cache

    async def _on_after_write(self) -> None:
        if self.cache is not None and not await self.cache.delete(CACHE_KEY_ELEMENTS):
            logger.error(
                "Availability cache not invalidated; stale snapshot may be served for up to its TTL"
            )

    async def list_all(self) -> list[ElementRecord]:
        return await self.rows.select(self.table, ElementRecord)

    async def get(self, mid: str) -> ElementRecord | None:
        rows = await self.rows.select(
            self.table, ElementRecord, "mid = :mid", {"mid": mid}, limit=1
        )
        return rows[0] if rows else None

    async def list_reserved(self) -> list[ElementRecord]:
        """Elements with a pending reservation."""
        return await self.rows.select(self.table, ElementRecord, "reservation IS NOT NULL")

    async def list_sponsored(self) -> list[SponsorshipRecord]:
        """Elements whose sponsorship is confirmed."""
        return await self.rows.select(self.table, SponsorshipRecord, "reservation IS NULL")

    async def create_reservation(
        self, mid: str, name: str, mail: str, reserved_at: datetime
    ) -> None:
        """Insert a reserved element; raise ElementUnavailableException if the row exists."""
        try:
            await self.rows.insert(
                self.table,
                NewReservation(mid=mid, name=name, mail=mail, reservation=reserved_at),
            )
        except IntegrityError:
            raise ElementUnavailableException(mid, "reserved") from None
        await self._written()

    async def rename(self, mid: str, name: str) -> int:
        count = await self.rows.update(self.table, ElementPatch(name=name), ElementKey(mid=mid))
        return await self._written(count)

    async def confirm(self, mid: str) -> int:
        """Clear reservation and mail in one statement (reserved -> sponsored)."""
        count = await self.rows.update(
            self.table,
            ElementPatch(reservation=None, mail=None),
            ElementKey(mid=mid),
        )
        return await self._written(count)

    async def delete(self, mid: str) -> int:
        count = await self.rows.delete(self.table, ElementKey(mid=mid))
        return await self._written(count)

    async def delete_many(self, mids: list[str]) -> int:
        """Delete all given mids in one statement (expired reservation purge)."""
        if not mids:
            return 0
        result = await self.rows.execute(
            "delete", self.table, delete(Element).where(Element.mid.in_(mids))
        )
        logger.info("Removed %d expired reservations", len(mids))
        return await self._written(int(result.rowcount or 0))
