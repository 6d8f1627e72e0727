"""Create the schema and the admin account.

Usage:
    python -m scripts.setup_database

Creates missing tables (use alembic for upgrades of an existing database)
and, if no admin account exists yet, creates one with a generated password
that is printed once.
"""

import asyncio
import secrets
import sys

from sponsorship.core.config import get_settings
from sponsorship.infrastructure.persistence import models  # noqa: F401
from sponsorship.infrastructure.persistence.database import (
    Base,
    dispose_engine,
    get_engine,
    get_session_factory,
)
from sponsorship.infrastructure.persistence.repositories import UserRepository


async def main() -> None:
    settings = get_settings()
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    print("Tables created: users, elements")

    async with get_session_factory()() as session:
        user_repo = UserRepository(session)
        if await user_repo.get_by_name(settings.admin_username) is not None:
            print(f"Admin account {settings.admin_username!r} already exists", file=sys.stderr)
        else:
            password = secrets.token_urlsafe(24)
            await user_repo.create_user(settings.admin_username, password)
            await user_repo.commit()
            print(f"Created admin account {settings.admin_username!r} with password: {password}")
    await dispose_engine()


if __name__ == "__main__":
    asyncio.run(main())
