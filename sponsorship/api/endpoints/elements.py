"""Elements API: public availability and reservations, renaming/deleting for users."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from sponsorship.api.dependencies import (
    CurrentUser,
    get_availability_service,
    get_reservation_service,
)
from sponsorship.application.dtos.element import AvailabilitySnapshot
from sponsorship.application.services import AvailabilityService, ReservationService
from sponsorship.core.limiter import limit_reservations
from sponsorship.schemas.element import (
    AvailabilityResponse,
    ElementRenameRequest,
    ReservationRequest,
)

router = APIRouter()

Mid = Annotated[str, Query(min_length=1, description="Element mnemonic, e.g. pv-003")]


def _to_response(snapshot: AvailabilitySnapshot) -> AvailabilityResponse:
    return AvailabilityResponse(taken=snapshot.taken, reserved=snapshot.reserved)


@router.get("", response_model=AvailabilityResponse)
async def get_elements(
    availability: Annotated[AvailabilityService, Depends(get_availability_service)],
) -> AvailabilityResponse:
    """Taken and reserved elements. Everything else is available."""
    return _to_response(await availability.get_snapshot())


@router.post("", response_model=AvailabilityResponse)
@limit_reservations
async def reserve_element(
    request: Request,
    mid: Mid,
    body: ReservationRequest,
    reservations: Annotated[ReservationService, Depends(get_reservation_service)],
) -> AvailabilityResponse:
    """Reserve an element and send the reservation mail."""
    return _to_response(await reservations.reserve(mid, body.name, str(body.mail)))


@router.patch("", response_model=AvailabilityResponse)
async def rename_element(
    mid: Mid,
    body: ElementRenameRequest,
    user: CurrentUser,
    reservations: Annotated[ReservationService, Depends(get_reservation_service)],
    availability: Annotated[AvailabilityService, Depends(get_availability_service)],
) -> AvailabilityResponse:
    await reservations.rename(mid, body.name)
    return _to_response(await availability.get_snapshot())


@router.delete("", response_model=AvailabilityResponse)
async def delete_element(
    mid: Mid,
    user: CurrentUser,
    reservations: Annotated[ReservationService, Depends(get_reservation_service)],
    availability: Annotated[AvailabilityService, Depends(get_availability_service)],
) -> AvailabilityResponse:
    await reservations.delete(mid)
    return _to_response(await availability.get_snapshot())
