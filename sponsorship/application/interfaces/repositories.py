"""Repository interfaces (ports) for the application layer.

Protocols define the contracts the persistence repositories fulfil. All
types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from sponsorship.application.dtos.element import ElementRecord, SponsorshipRecord
    from sponsorship.application.dtos.user import UserRecord, UserSummary


class IElementRepository(Protocol):
    """Protocol for the elements table. commit() invalidates the availability snapshot."""

    async def list_all(self) -> list[ElementRecord]:
        """Return every element row."""

    async def get(self, mid: str) -> ElementRecord | None:
        """Return the element or None."""

    async def list_reserved(self) -> list[ElementRecord]:
        """Elements with a pending reservation."""

    async def list_sponsored(self) -> list[SponsorshipRecord]:
        """Elements whose sponsorship is confirmed."""

    async def create_reservation(
        self, mid: str, name: str, mail: str, reserved_at: datetime
    ) -> None:
        """Insert a reserved element; raise ElementUnavailableException if it exists."""

    async def rename(self, mid: str, name: str) -> int:
        """Set the sponsor name. Returns rows updated."""

    async def confirm(self, mid: str) -> int:
        """Clear reservation and mail. Returns rows updated."""

    async def delete(self, mid: str) -> int:
        """Delete mid. Returns rows deleted."""

    async def delete_many(self, mids: list[str]) -> int:
        """Delete all given mids. Returns rows deleted."""

    async def commit(self) -> None:
        """Commit pending writes."""


class IUserRepository(Protocol):
    """Protocol for the users table."""

    async def get_by_uid(self, uid: int) -> UserRecord | None:
        """Return user by id."""

    async def get_by_name(self, name: str) -> UserRecord | None:
        """Return user by name."""

    async def list_summaries(self) -> list[UserSummary]:
        """Return all users without password hash or token version."""

    async def create_user(self, name: str, password: str) -> None:
        """Create user with hashed password; raise UserAlreadyExistsException on duplicates."""

    async def change_password(self, uid: int, password: str) -> int:
        """Store a new hash and bump the token version. Returns rows updated."""

    async def delete(self, uid: int) -> int:
        """Delete uid. Returns rows deleted."""

    async def authenticate(self, name: str, password: str) -> UserRecord | None:
        """Return the user if name and password match, else None."""

    async def commit(self) -> None:
        """Commit pending writes."""
