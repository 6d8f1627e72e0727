"""Reservations API (user): list pending reservations, confirm, rename, delete."""

from typing import Annotated

from fastapi import APIRouter, BackgroundTasks, Depends, Query

from sponsorship.api.dependencies import CurrentUser, get_reservation_service
from sponsorship.application.services import ReservationService
from sponsorship.schemas.element import ElementRenameRequest, ReservationResponse

router = APIRouter()

Mid = Annotated[str, Query(min_length=1)]


async def _listing(reservations: ReservationService) -> list[ReservationResponse]:
    return [
        ReservationResponse.model_validate(r) for r in await reservations.list_reservations()
    ]


@router.get("", response_model=list[ReservationResponse])
async def list_reservations(
    user: CurrentUser,
    reservations: Annotated[ReservationService, Depends(get_reservation_service)],
) -> list[ReservationResponse]:
    return await _listing(reservations)


@router.post("", response_model=list[ReservationResponse])
async def confirm_reservation(
    mid: Mid,
    user: CurrentUser,
    background_tasks: BackgroundTasks,
    reservations: Annotated[ReservationService, Depends(get_reservation_service)],
) -> list[ReservationResponse]:
    """Confirm the sponsorship of mid.

    The certificate mail is sent after the response; a failed delivery does
    not undo the confirmation (re-issue via GET /certificates).
    """
    confirmed = await reservations.confirm(mid)
    background_tasks.add_task(reservations.deliver_certificate, confirmed)
    return await _listing(reservations)


@router.patch("", response_model=list[ReservationResponse])
async def rename_reservation(
    mid: Mid,
    body: ElementRenameRequest,
    user: CurrentUser,
    reservations: Annotated[ReservationService, Depends(get_reservation_service)],
) -> list[ReservationResponse]:
    await reservations.rename(mid, body.name)
    return await _listing(reservations)


@router.delete("", response_model=list[ReservationResponse])
async def delete_reservation(
    mid: Mid,
    user: CurrentUser,
    reservations: Annotated[ReservationService, Depends(get_reservation_service)],
) -> list[ReservationResponse]:
    await reservations.delete(mid)
    return await _listing(reservations)
