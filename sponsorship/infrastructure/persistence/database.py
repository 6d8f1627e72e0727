"""Persistence: async engine, session factory, and Base for SQLAlchemy ORM.

Schema is managed by Alembic migrations (see migrations/) or created by
scripts/setup_database.py. Engine and session factory are created lazily on
first use (get_db, get_session_factory) so import does not trigger
Settings validation.
"""

import logging
from collections.abc import AsyncIterator
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from sponsorship.core.config import get_settings

logger = logging.getLogger(__name__)

# Set by _ensure_engine() on first use; avoids get_settings() at import time.
engine: Any = None
AsyncSessionLocal: async_sessionmaker[AsyncSession] | None = None


def _ensure_engine() -> None:
    """Create engine and AsyncSessionLocal on first use."""
    global engine, AsyncSessionLocal
    if AsyncSessionLocal is not None:
        return
    settings = get_settings()
    if settings.database_url.startswith("sqlite"):
        # In-memory SQLite must share one connection across sessions.
        engine = create_async_engine(
            settings.database_url,
            echo=settings.database_echo,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    else:
        engine = create_async_engine(
            settings.database_url,
            echo=settings.database_echo,
            pool_pre_ping=True,
            pool_size=settings.db_pool_size if settings.db_pool_size is not None else 10,
            max_overflow=(
                settings.db_max_overflow if settings.db_max_overflow is not None else 90
            ),
            pool_recycle=60,
        )
    AsyncSessionLocal = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy declarative models."""


async def dispose_engine() -> None:
    """Dispose the engine and forget the session factory (shutdown, tests)."""
    global engine, AsyncSessionLocal
    if engine is not None:
        await engine.dispose()
        logger.info("Database engine disposed")
    engine = None
    AsyncSessionLocal = None


async def get_db() -> AsyncIterator[AsyncSession]:
    """Database session dependency.

    The session autobegins on first use. Services commit explicitly through
    their repositories (BaseRepository.commit) so cache invalidation can
    follow the commit; anything uncommitted is rolled back on close.
    """
    _ensure_engine()
    assert AsyncSessionLocal is not None
    async with AsyncSessionLocal() as session:
        yield session


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Session factory for code outside request handling (scripts, tests)."""
    _ensure_engine()
    assert AsyncSessionLocal is not None
    return AsyncSessionLocal


def get_engine() -> Any:
    _ensure_engine()
    return engine
