"""User administration: list, create, change password, delete."""

from __future__ import annotations

import logging

from sponsorship.application.dtos.user import UserSummary
from sponsorship.application.interfaces import IUserRepository
from sponsorship.core.constants import PASSWORD_MAX_LENGTH, PASSWORD_MIN_LENGTH
from sponsorship.domain.exceptions import ResourceNotFoundException, ValidationException

logger = logging.getLogger(__name__)


def validate_password(password: str) -> None:
    """Raise ValidationException unless password length is within the allowed range."""
    if not PASSWORD_MIN_LENGTH <= len(password) <= PASSWORD_MAX_LENGTH:
        raise ValidationException(
            f"password must be between {PASSWORD_MIN_LENGTH} and "
            f"{PASSWORD_MAX_LENGTH} characters",
            field="password",
        )


class UserService:
    """Account management. Every write commits before returning."""

    def __init__(self, user_repo: IUserRepository, *, admin_username: str) -> None:
        self._user_repo = user_repo
        self._admin_username = admin_username

    async def list_users(self) -> list[UserSummary]:
        return await self._user_repo.list_summaries()

    async def create_user(self, name: str, password: str) -> None:
        if not name:
            raise ValidationException("user name must not be empty", field="name")
        validate_password(password)
        await self._user_repo.create_user(name, password)
        await self._user_repo.commit()

    async def change_password(self, uid: int, password: str) -> None:
        """Store a new password and bump the token version of uid."""
        validate_password(password)
        if not await self._user_repo.change_password(uid, password):
            raise ResourceNotFoundException("user", str(uid), "user doesn't exist")
        await self._user_repo.commit()
        logger.info("Password changed for uid %s; existing sessions revoked", uid)

    async def delete_user(self, uid: int) -> None:
        user = await self._user_repo.get_by_uid(uid)
        if user is None:
            raise ResourceNotFoundException("user", str(uid), "user doesn't exist")
        if user.name == self._admin_username:
            raise ValidationException("the admin account can't be deleted", field="uid")
        await self._user_repo.delete(uid)
        await self._user_repo.commit()
