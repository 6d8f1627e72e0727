"""Application services: availability snapshot, sessions, reservations, users."""

from sponsorship.application.services.availability_service import AvailabilityService
from sponsorship.application.services.reservation_service import (
    ConfirmedSponsorship,
    ReservationService,
)
from sponsorship.application.services.session_service import SessionService
from sponsorship.application.services.user_service import UserService, validate_password

__all__ = [
    "AvailabilityService",
    "ConfirmedSponsorship",
    "ReservationService",
    "SessionService",
    "UserService",
    "validate_password",
]
