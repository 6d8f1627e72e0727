"""Shared utilities."""

from sponsorship.shared.utils.datetime import ensure_utc, utc_now

__all__ = ["ensure_utc", "utc_now"]
