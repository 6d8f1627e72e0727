"""Health check endpoints for liveness and readiness probes."""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from sponsorship.api.dependencies import DbSession
from sponsorship.schemas.health import HealthResponse, ReadinessErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get(
    "/ready",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable", "model": ReadinessErrorResponse}},
)
async def readiness_check(db: DbSession) -> HealthResponse | JSONResponse:
    """Return 200 if the database answers, 503 otherwise."""
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.warning("Readiness check failed: %s", e)
        return JSONResponse(
            status_code=503,
            content=ReadinessErrorResponse(message="database unreachable").model_dump(),
        )
    return HealthResponse()
