"""Certificates API (user): render a sponsorship certificate on demand."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from fastapi.responses import FileResponse
from starlette.background import BackgroundTask

from sponsorship.api.dependencies import CurrentUser, get_reservation_service
from sponsorship.application.services import ReservationService

router = APIRouter()


@router.get("", response_class=FileResponse)
async def get_certificate(
    mid: Annotated[str, Query(min_length=1)],
    user: CurrentUser,
    reservations: Annotated[ReservationService, Depends(get_reservation_service)],
) -> FileResponse:
    """Stream the certificate PDF as attachment; the file is removed afterwards."""
    certificate = await reservations.render_certificate(mid)
    return FileResponse(
        certificate.path,
        media_type="application/pdf",
        filename=certificate.filename,
        background=BackgroundTask(certificate.cleanup),
    )
