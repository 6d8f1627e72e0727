"""Application DTOs: record shapes read and written through RowMapper, mails, certificates."""

from sponsorship.application.dtos.element import (
    AvailabilitySnapshot,
    ElementKey,
    ElementPatch,
    ElementRecord,
    NewReservation,
    SponsorshipRecord,
)
from sponsorship.application.dtos.mail import Certificate, MailMessage
from sponsorship.application.dtos.unset import UNSET, Unset
from sponsorship.application.dtos.user import NewUser, UserKey, UserRecord, UserSummary

__all__ = [
    "UNSET",
    "AvailabilitySnapshot",
    "Certificate",
    "ElementKey",
    "ElementPatch",
    "ElementRecord",
    "MailMessage",
    "NewReservation",
    "NewUser",
    "SponsorshipRecord",
    "Unset",
    "UserKey",
    "UserRecord",
    "UserSummary",
]
