"""Element, reservation and sponsorship API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class ReservationRequest(BaseModel):
    """Request body for POST /elements?mid=..."""

    name: str = Field(..., min_length=1, max_length=256, description="Sponsor name")
    mail: EmailStr = Field(..., description="Contact address for the confirmation mail")


class ElementRenameRequest(BaseModel):
    """Request body for PATCH on elements, reservations and sponsorships."""

    name: str = Field(..., min_length=1, max_length=256)


class AvailabilityResponse(BaseModel):
    """Availability snapshot: taken mid -> sponsor name, and reserved mids."""

    taken: dict[str, str]
    reserved: list[str]

    model_config = ConfigDict(from_attributes=True)


class ReservationResponse(BaseModel):
    """A pending reservation."""

    mid: str
    name: str
    reservation: datetime | None
    mail: str | None

    model_config = ConfigDict(from_attributes=True)


class SponsorshipResponse(BaseModel):
    """A confirmed sponsorship."""

    mid: str
    name: str
    mail: str | None

    model_config = ConfigDict(from_attributes=True)
