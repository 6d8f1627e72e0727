"""
UTC datetime utilities for consistent timezone handling.

Reservation timestamps are stored timezone-aware where the backend supports
it; SQLite returns naive values, which ensure_utc normalizes.
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return the current UTC datetime with timezone info."""
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)
