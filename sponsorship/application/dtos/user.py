"""User record shapes (no dependency on ORM)."""

from dataclasses import dataclass

from sponsorship.application.dtos.unset import UNSET, Unset


@dataclass(frozen=True)
class UserRecord:
    """Full users row, including password hash and token version."""

    uid: int
    name: str
    password: str
    tid: int


@dataclass(frozen=True)
class UserSummary:
    """Public user listing (no password, no token version)."""

    uid: int
    name: str


@dataclass(frozen=True)
class NewUser:
    name: str
    password: str


@dataclass(frozen=True)
class UserKey:
    """Predicate for user updates and deletes."""

    uid: int | Unset = UNSET
    name: str | Unset = UNSET
