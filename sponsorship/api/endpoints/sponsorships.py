"""Sponsorships API (user): list, rename and delete confirmed sponsorships."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from sponsorship.api.dependencies import CurrentUser, get_reservation_service
from sponsorship.application.services import ReservationService
from sponsorship.schemas.element import ElementRenameRequest, SponsorshipResponse

router = APIRouter()

Mid = Annotated[str, Query(min_length=1)]


async def _listing(reservations: ReservationService) -> list[SponsorshipResponse]:
    return [
        SponsorshipResponse.model_validate(s) for s in await reservations.list_sponsorships()
    ]


@router.get("", response_model=list[SponsorshipResponse])
async def list_sponsorships(
    user: CurrentUser,
    reservations: Annotated[ReservationService, Depends(get_reservation_service)],
) -> list[SponsorshipResponse]:
    return await _listing(reservations)


@router.patch("", response_model=list[SponsorshipResponse])
async def rename_sponsorship(
    mid: Mid,
    body: ElementRenameRequest,
    user: CurrentUser,
    reservations: Annotated[ReservationService, Depends(get_reservation_service)],
) -> list[SponsorshipResponse]:
    await reservations.rename(mid, body.name)
    return await _listing(reservations)


@router.delete("", response_model=list[SponsorshipResponse])
async def delete_sponsorship(
    mid: Mid,
    user: CurrentUser,
    reservations: Annotated[ReservationService, Depends(get_reservation_service)],
) -> list[SponsorshipResponse]:
    await reservations.delete(mid)
    return await _listing(reservations)
