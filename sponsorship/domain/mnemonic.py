"""Element mnemonics ("mid"): category prefix plus number, e.g. ``pv-003``.

Valid categories and their numeric ranges come from settings.element_ranges.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass

from sponsorship.core.config import ElementRange

MID_PATTERN = re.compile(r"^([a-z]+)-([0-9a-z]+)$")


@dataclass(frozen=True)
class ElementLabel:
    """Display strings for an element category (German, used in mails and certificates)."""

    type_name: str
    article: str


ELEMENT_LABELS: dict[str, ElementLabel] = {
    "pv": ElementLabel(type_name="PV-Modul", article="das"),
    "bs": ElementLabel(type_name="Batteriespeicher", article="den"),
}


def is_valid_mid(mid: str, ranges: Mapping[str, ElementRange]) -> bool:
    """Return True if mid has a configured prefix and its number is within range.

    Non-numeric suffixes (e.g. ``pv-abc``) are rejected.
    """
    match = MID_PATTERN.match(mid or "")
    if match is None:
        return False
    prefix, number = match.groups()
    rng = ranges.get(prefix)
    if rng is None:
        return False
    if not number.isdigit():
        return False
    return rng.start <= int(number) <= rng.end


def element_prefix(mid: str) -> str:
    return mid.split("-", 1)[0]


def element_type(mid: str) -> str:
    """Human readable category name ("PV-Modul"); empty for unknown prefixes."""
    label = ELEMENT_LABELS.get(element_prefix(mid))
    return label.type_name if label else ""


def element_article(mid: str) -> str:
    """Accusative article matching element_type ("das", "den")."""
    label = ELEMENT_LABELS.get(element_prefix(mid))
    return label.article if label else ""


def element_number(mid: str) -> str:
    """Number part as printed on certificates ("003")."""
    parts = mid.split("-", 1)
    return parts[1].upper() if len(parts) == 2 else ""
