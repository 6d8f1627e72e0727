"""Tests for AvailabilityService: snapshot rebuild, expired purge, cache use."""

from datetime import UTC, datetime, timedelta

from sponsorship.application.dtos import AvailabilitySnapshot, ElementRecord
from sponsorship.application.services import AvailabilityService
from sponsorship.core.constants import CACHE_KEY_ELEMENTS
from sponsorship.infrastructure.cache import MemoryCacheService

NOW = datetime(2026, 6, 1, 12, 0, tzinfo=UTC)
EXPIRATION = timedelta(days=14)


class FakeElementRepo:
    def __init__(self, elements: list[ElementRecord]) -> None:
        self.elements = elements
        self.list_calls = 0
        self.deleted: list[list[str]] = []
        self.commits = 0

    async def list_all(self) -> list[ElementRecord]:
        self.list_calls += 1
        return list(self.elements)

    async def delete_many(self, mids: list[str]) -> int:
        self.deleted.append(list(mids))
        self.elements = [e for e in self.elements if e.mid not in mids]
        return len(mids)

    async def commit(self) -> None:
        self.commits += 1


def _service(repo: FakeElementRepo, cache: MemoryCacheService) -> AvailabilityService:
    return AvailabilityService(
        repo,
        cache,
        ttl_seconds=60,
        reservation_expiration=EXPIRATION,
        clock=lambda: NOW,
    )


async def test_rebuild_splits_taken_reserved_and_purges_expired() -> None:
    repo = FakeElementRepo(
        [
            ElementRecord("pv-001", "Ada", None, None),
            ElementRecord("pv-002", "Ben", NOW - timedelta(days=1), "ben@example.org"),
            ElementRecord("pv-003", "Cy", NOW - EXPIRATION - timedelta(seconds=1), "cy@example.org"),
            ElementRecord("bs-001", "Di", NOW - EXPIRATION, "di@example.org"),
        ]
    )
    cache = MemoryCacheService()

    snapshot = await _service(repo, cache).get_snapshot()

    assert snapshot.taken == {"pv-001": "Ada"}
    assert sorted(snapshot.reserved) == ["bs-001", "pv-002"]
    assert repo.deleted == [["pv-003"]]
    assert repo.commits == 1
    assert await cache.get(CACHE_KEY_ELEMENTS) == snapshot.to_dict()


async def test_cached_snapshot_is_served_without_store_access() -> None:
    repo = FakeElementRepo([ElementRecord("pv-001", "Ada", None, None)])
    cache = MemoryCacheService()
    service = _service(repo, cache)

    first = await service.get_snapshot()
    second = await service.get_snapshot()

    assert first == second
    assert repo.list_calls == 1
    assert repo.commits == 0


async def test_invalidate_forces_rebuild() -> None:
    repo = FakeElementRepo([])
    cache = MemoryCacheService()
    service = _service(repo, cache)

    assert await service.get_snapshot() == AvailabilitySnapshot()
    repo.elements.append(ElementRecord("pv-004", "Eve", NOW, "eve@example.org"))
    await service.invalidate()

    assert (await service.get_snapshot()).reserved == ["pv-004"]
    assert repo.list_calls == 2


def test_snapshot_state_of() -> None:
    snapshot = AvailabilitySnapshot(taken={"pv-001": "Ada"}, reserved=["pv-002"])
    assert snapshot.state_of("pv-001") == "taken"
    assert snapshot.state_of("pv-002") == "reserved"
    assert snapshot.state_of("pv-003") == "available"
    assert AvailabilitySnapshot.from_dict(snapshot.to_dict()) == snapshot
