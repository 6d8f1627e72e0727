"""Tests for element mnemonic validation and display helpers."""

import pytest

from sponsorship.core.config import ElementRange
from sponsorship.domain.mnemonic import (
    element_article,
    element_number,
    element_type,
    is_valid_mid,
)

RANGES = {"pv": ElementRange(start=1, end=200), "bs": ElementRange(start=1, end=20)}


@pytest.mark.parametrize("mid", ["pv-1", "pv-001", "pv-200", "bs-010", "bs-20"])
def test_valid_mids_are_accepted(mid: str) -> None:
    assert is_valid_mid(mid, RANGES)


@pytest.mark.parametrize(
    "mid",
    [
        "pv-0",
        "pv-201",
        "bs-21",
        "xx-1",
        "pv-abc",
        "pv-1a",
        "pv",
        "pv-",
        "-1",
        "PV-1",
        "pv_1",
        "",
    ],
)
def test_invalid_mids_are_rejected(mid: str) -> None:
    """Unknown prefixes, out-of-range and non-numeric suffixes are rejected."""
    assert not is_valid_mid(mid, RANGES)


def test_no_configured_ranges_rejects_everything() -> None:
    assert not is_valid_mid("pv-1", {})


def test_display_helpers() -> None:
    assert element_type("pv-003") == "PV-Modul"
    assert element_article("pv-003") == "das"
    assert element_type("bs-010") == "Batteriespeicher"
    assert element_article("bs-010") == "den"
    assert element_number("pv-003") == "003"


def test_display_helpers_unknown_prefix() -> None:
    assert element_type("zz-1") == ""
    assert element_article("zz-1") == ""
    assert element_number("nodash") == ""
