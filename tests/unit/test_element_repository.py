"""Tests for ElementRepository cache invalidation after commit."""

import logging
from typing import Any

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from sponsorship.core.constants import CACHE_KEY_ELEMENTS
from sponsorship.infrastructure.cache import MemoryCacheService
from sponsorship.infrastructure.persistence.repositories import ElementRepository
from sponsorship.shared.utils.datetime import utc_now


class UnreachableCache(MemoryCacheService):
    """Serves reads but cannot delete, like a Redis that rejects the command."""

    async def delete(self, key: str) -> bool:
        return False


async def _cached(cache: Any) -> Any:
    await cache.set(CACHE_KEY_ELEMENTS, {"taken": {}, "reserved": []})
    return cache


async def test_commit_invalidates_snapshot(db_session: AsyncSession) -> None:
    cache = await _cached(MemoryCacheService())
    repo = ElementRepository(db_session, cache)

    await repo.create_reservation("pv-001", "Ada", "ada@example.org", utc_now())
    assert await cache.get(CACHE_KEY_ELEMENTS) is not None

    await repo.commit()
    assert await cache.get(CACHE_KEY_ELEMENTS) is None


async def test_commit_without_write_keeps_snapshot(db_session: AsyncSession) -> None:
    cache = await _cached(MemoryCacheService())
    repo = ElementRepository(db_session, cache)
    await repo.list_all()
    await repo.commit()
    assert await cache.get(CACHE_KEY_ELEMENTS) is not None


async def test_failed_invalidation_is_logged(
    db_session: AsyncSession, caplog: pytest.LogCaptureFixture
) -> None:
    repo = ElementRepository(db_session, await _cached(UnreachableCache()))
    await repo.create_reservation("pv-001", "Ada", "ada@example.org", utc_now())

    with caplog.at_level(logging.ERROR):
        await repo.commit()

    assert "not invalidated" in caplog.text
