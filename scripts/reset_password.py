"""Reset a user's password and revoke their sessions.

Usage:
    python -m scripts.reset_password <name> <new_password>
"""

import asyncio
import sys

from sponsorship.application.services import validate_password
from sponsorship.domain.exceptions import ValidationException
from sponsorship.infrastructure.persistence.database import dispose_engine, get_session_factory
from sponsorship.infrastructure.persistence.repositories import UserRepository


async def main() -> None:
    if len(sys.argv) < 3:
        print("Usage: python -m scripts.reset_password <name> <new_password>", file=sys.stderr)
        sys.exit(1)
    name = sys.argv[1]
    new_password = sys.argv[2]
    try:
        validate_password(new_password)
    except ValidationException as e:
        print(e.message, file=sys.stderr)
        sys.exit(1)

    async with get_session_factory()() as session:
        user_repo = UserRepository(session)
        user = await user_repo.get_by_name(name)
        if user is None:
            print(f"User not found: {name}", file=sys.stderr)
            sys.exit(1)
        await user_repo.change_password(user.uid, new_password)
        await user_repo.commit()
        print(f"Password reset for user {user.uid} ({user.name})")
    await dispose_engine()


if __name__ == "__main__":
    asyncio.run(main())
