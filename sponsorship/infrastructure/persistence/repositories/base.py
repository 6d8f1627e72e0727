"""Base repository: row mapper access, commit, and the after-write hook (cache invalidation)."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from sponsorship.domain.exceptions import StoreException

# Registers all tables on Base.metadata before the mapper resolves them.
from sponsorship.infrastructure.persistence import models  # noqa: F401
from sponsorship.infrastructure.persistence.row_mapper import RowMapper

logger = logging.getLogger(__name__)


class BaseRepository:
    """Base repository bound to one table.

    Subclasses set ``table`` and override _on_after_write for cache
    invalidation. Writes report through _written(); the hook runs once the
    write is committed, so readers never cache uncommitted state.
    """

    table: str

    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self.rows = RowMapper(db)
        self._pending_write = False

    async def _written(self, rowcount: int = 1) -> int:
        """Record a completed write and pass rowcount through."""
        self._pending_write = True
        return rowcount

    async def commit(self) -> None:
        """Commit the session, then run _on_after_write if anything was written."""
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            logger.error("Commit on %s failed: %s", self.table, e)
            raise StoreException(f"commit {self.table}") from e
        if self._pending_write:
            self._pending_write = False
            await self._on_after_write()

    async def _on_after_write(self) -> None:
        """Override in subclasses to invalidate caches."""
