"""Session issuing and the authorization guard.

A session token is valid only while its tid matches the user's current
token version; bumping the version (password change) revokes every token
issued before.
"""

from __future__ import annotations

import logging

from jose import JWTError

from sponsorship.application.dtos.user import UserRecord
from sponsorship.application.interfaces import IUserRepository
from sponsorship.core.constants import MESSAGE_WRONG_LOGIN
from sponsorship.domain.exceptions import AuthenticationException, TokenSigningException
from sponsorship.infrastructure.security.jwt import create_session_token, decode_session_token

logger = logging.getLogger(__name__)


class SessionService:
    """Login and fail-closed user/admin checks."""

    def __init__(self, user_repo: IUserRepository, *, admin_username: str) -> None:
        self._user_repo = user_repo
        self._admin_username = admin_username

    def issue_token(self, user: UserRecord) -> str:
        try:
            return create_session_token(user.uid, user.tid)
        except JWTError as e:
            logger.error("Session token creation failed for uid %s: %s", user.uid, e)
            raise TokenSigningException() from e

    async def login(self, name: str, password: str) -> tuple[UserRecord, str]:
        """Return (user, token). Unknown user and wrong password fail identically."""
        user = await self._user_repo.authenticate(name, password)
        if user is None:
            logger.info("Failed login for %r", name)
            raise AuthenticationException(MESSAGE_WRONG_LOGIN)
        token = self.issue_token(user)
        logger.info("User with uid %s logged in", user.uid)
        return user, token

    async def check_user(self, token: str | None) -> UserRecord | None:
        """Return the user if token is valid and current, else None.

        Store errors are not swallowed; they propagate as StoreException.
        """
        if not token:
            return None
        try:
            uid, tid = decode_session_token(token)
        except ValueError as e:
            logger.debug("Rejected session token: %s", e)
            return None
        user = await self._user_repo.get_by_uid(uid)
        if user is None:
            logger.info("Session token for unknown uid %s", uid)
            return None
        if user.tid != tid:
            logger.info("Stale session token for uid %s (tid %s, current %s)", uid, tid, user.tid)
            return None
        return user

    async def check_admin(self, token: str | None) -> UserRecord | None:
        user = await self.check_user(token)
        if user is None or user.name != self._admin_username:
            return None
        return user

    async def reissue(self, uid: int) -> str:
        """Token for uid at its current token version (after a password change)."""
        user = await self._user_repo.get_by_uid(uid)
        if user is None:
            raise AuthenticationException()
        return self.issue_token(user)
