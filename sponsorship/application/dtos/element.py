"""Element record shapes and the cached availability snapshot."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from sponsorship.application.dtos.unset import UNSET, Unset


@dataclass(frozen=True)
class ElementRecord:
    """Full elements row."""

    mid: str
    name: str
    reservation: datetime | None
    mail: str | None


@dataclass(frozen=True)
class SponsorshipRecord:
    """Confirmed element (reservation column not selected)."""

    mid: str
    name: str
    mail: str | None


@dataclass(frozen=True)
class NewReservation:
    mid: str
    name: str
    mail: str
    reservation: datetime


@dataclass(frozen=True)
class ElementKey:
    """Predicate for element updates and deletes."""

    mid: str | Unset = UNSET


@dataclass(frozen=True)
class ElementPatch:
    """Partial element update; UNSET fields are not touched."""

    name: str | Unset = UNSET
    reservation: datetime | None | Unset = UNSET
    mail: str | None | Unset = UNSET


@dataclass(frozen=True)
class AvailabilitySnapshot:
    """Taken elements (mid -> sponsor name) and mids with a pending reservation."""

    taken: dict[str, str] = field(default_factory=dict)
    reserved: list[str] = field(default_factory=list)

    def state_of(self, mid: str) -> str:
        """Return "taken", "reserved" or "available"."""
        if mid in self.taken:
            return "taken"
        if mid in self.reserved:
            return "reserved"
        return "available"

    def to_dict(self) -> dict[str, Any]:
        return {"taken": dict(self.taken), "reserved": list(self.reserved)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AvailabilitySnapshot":
        return cls(
            taken=dict(data.get("taken") or {}),
            reserved=list(data.get("reserved") or []),
        )
