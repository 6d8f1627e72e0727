"""User repository: lookups, account administration and credential checks."""

from __future__ import annotations

import asyncio
import logging

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError

from sponsorship.application.dtos.user import NewUser, UserKey, UserRecord, UserSummary
from sponsorship.core.constants import TABLE_USERS
from sponsorship.domain.exceptions import UserAlreadyExistsException
from sponsorship.infrastructure.persistence.models.user import User
from sponsorship.infrastructure.persistence.repositories.base import BaseRepository
from sponsorship.infrastructure.security.password import get_password_hash, verify_password

logger = logging.getLogger(__name__)

# Compared against when the user does not exist so both paths cost one bcrypt check.
_dummy_hash_cache: str | None = None


async def _get_dummy_hash() -> str:
    global _dummy_hash_cache
    if _dummy_hash_cache is None:
        _dummy_hash_cache = await asyncio.to_thread(get_password_hash, "not-a-real-password")
    return _dummy_hash_cache


class UserRepository(BaseRepository):
    """Reads and writes of the users table."""

    table = TABLE_USERS

    async def get_by_uid(self, uid: int) -> UserRecord | None:
        rows = await self.rows.select(self.table, UserRecord, "uid = :uid", {"uid": uid}, limit=1)
        return rows[0] if rows else None

    async def get_by_name(self, name: str) -> UserRecord | None:
        rows = await self.rows.select(
            self.table, UserRecord, "name = :name", {"name": name}, limit=1
        )
        return rows[0] if rows else None

    async def list_summaries(self) -> list[UserSummary]:
        return await self.rows.select(self.table, UserSummary, "*")

    async def create_user(self, name: str, password: str) -> None:
        """Create user; raise UserAlreadyExistsException if the name is taken."""
        if await self.get_by_name(name) is not None:
            raise UserAlreadyExistsException(name)
        hashed = await asyncio.to_thread(get_password_hash, password)
        try:
            await self.rows.insert(self.table, NewUser(name=name, password=hashed))
        except IntegrityError:
            raise UserAlreadyExistsException(name) from None
        logger.info("Created user %s", name)
        await self._written()

    async def change_password(self, uid: int, password: str) -> int:
        """Store a new hash and bump tid, invalidating all sessions of the user.

        Both columns change in one statement. Returns the number of rows updated.
        """
        hashed = await asyncio.to_thread(get_password_hash, password)
        result = await self.rows.execute(
            "update",
            self.table,
            update(User).where(User.uid == uid).values(password=hashed, tid=User.tid + 1),
        )
        return await self._written(int(result.rowcount or 0))

    async def delete(self, uid: int) -> int:
        count = await self.rows.delete(self.table, UserKey(uid=uid))
        if count:
            logger.info("Deleted user %s", uid)
        return await self._written(count)

    async def authenticate(self, name: str, password: str) -> UserRecord | None:
        """Return the user if name and password match, else None."""
        user = await self.get_by_name(name)
        if user is None:
            await asyncio.to_thread(verify_password, password, await _get_dummy_hash())
            return None
        if not await asyncio.to_thread(verify_password, password, user.password):
            return None
        return user
