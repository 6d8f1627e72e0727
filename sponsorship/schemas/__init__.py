"""Pydantic request/response schemas for the API."""

from sponsorship.schemas.auth import LoginRequest, PasswordChangeRequest, SessionResponse
from sponsorship.schemas.element import (
    AvailabilityResponse,
    ElementRenameRequest,
    ReservationRequest,
    ReservationResponse,
    SponsorshipResponse,
)
from sponsorship.schemas.health import HealthResponse, ReadinessErrorResponse
from sponsorship.schemas.user import UserCreateRequest, UserResponse

__all__ = [
    "AvailabilityResponse",
    "ElementRenameRequest",
    "HealthResponse",
    "LoginRequest",
    "PasswordChangeRequest",
    "ReadinessErrorResponse",
    "ReservationRequest",
    "ReservationResponse",
    "SessionResponse",
    "SponsorshipResponse",
    "UserCreateRequest",
    "UserResponse",
]
