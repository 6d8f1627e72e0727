"""Application lifespan: startup and shutdown.

Only wiring of infrastructure: logging, a store check, cache
connect/disconnect and DB engine dispose. An unreachable store aborts
startup. The collaborators themselves are created in create_app() so they
exist even when the lifespan does not run (tests).
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from sponsorship.core.config import get_settings
from sponsorship.infrastructure.persistence.database import dispose_engine, get_engine
from sponsorship.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown."""
    settings = get_settings()
    setup_logging()

    try:
        async with get_engine().connect() as conn:
            await conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.critical("Database unreachable at startup: %s", e)
        await dispose_engine()
        raise
    await app.state.cache.connect()
    logger.info(
        "%s %s started (cache backend: %s)",
        settings.app_name,
        settings.app_version,
        settings.cache_backend,
    )

    yield

    await app.state.cache.disconnect()
    logger.info("Cache disconnected")
    await dispose_engine()
