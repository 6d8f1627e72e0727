"""Element reservation workflow: available -> reserved -> sponsored.

reserve: the reservation row is written only after the reservation mail was
accepted by the relay; a mail failure leaves the store untouched.

confirm: render certificate -> clear reservation and mail in one UPDATE ->
commit -> deliver the certificate mail (deliver_certificate, run by the
caller after the response). A failed render or store write leaves the
element reserved. A failed delivery is logged only; the sponsor's
certificate can be re-issued from GET /certificates.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime

from sponsorship.application.dtos.element import (
    AvailabilitySnapshot,
    ElementRecord,
    SponsorshipRecord,
)
from sponsorship.application.dtos.mail import Certificate
from sponsorship.application.interfaces import (
    ICertificateRenderer,
    IElementRepository,
    IMailSender,
    IMailTemplateRenderer,
)
from sponsorship.application.services.availability_service import AvailabilityService
from sponsorship.core.config import ElementRange
from sponsorship.domain.exceptions import (
    ElementUnavailableException,
    InvalidMnemonicException,
    ResourceNotFoundException,
    SponsorshipException,
    ValidationException,
)
from sponsorship.domain.mnemonic import is_valid_mid
from sponsorship.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfirmedSponsorship:
    """Result of confirm(): the certificate to deliver and where to send it."""

    certificate: Certificate
    name: str
    mail: str


class ReservationService:
    """Reserve, confirm, rename and delete elements."""

    def __init__(
        self,
        element_repo: IElementRepository,
        availability: AvailabilityService,
        mail_sender: IMailSender,
        mail_templates: IMailTemplateRenderer,
        certificate_renderer: ICertificateRenderer,
        *,
        element_ranges: Mapping[str, ElementRange],
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._element_repo = element_repo
        self._availability = availability
        self._mail_sender = mail_sender
        self._mail_templates = mail_templates
        self._certificates = certificate_renderer
        self._ranges = element_ranges
        self._clock = clock

    def validate_mid(self, mid: str) -> str:
        if not is_valid_mid(mid, self._ranges):
            raise InvalidMnemonicException(mid)
        return mid

    async def reserve(self, mid: str, name: str, mail: str) -> AvailabilitySnapshot:
        """Reserve mid for name and return the refreshed snapshot."""
        self.validate_mid(mid)
        if not name.strip():
            raise ValidationException("name must not be empty", field="name")
        snapshot = await self._availability.get_snapshot()
        state = snapshot.state_of(mid)
        if state != "available":
            logger.info("Element %s is already %s", mid, state)
            raise ElementUnavailableException(mid, state)

        await self._mail_sender.send(self._mail_templates.reservation_mail(mid, name, mail))

        await self._element_repo.create_reservation(mid, name, mail, self._clock())
        await self._element_repo.commit()
        logger.debug("Reserved element %s", mid)
        return await self._availability.get_snapshot()

    async def rename(self, mid: str, name: str) -> None:
        self.validate_mid(mid)
        if not name.strip():
            raise ValidationException("name must not be empty", field="name")
        if not await self._element_repo.rename(mid, name):
            raise ResourceNotFoundException("element", mid)
        await self._element_repo.commit()

    async def delete(self, mid: str) -> None:
        """Delete mid in any state; deleting an available element is a no-op."""
        self.validate_mid(mid)
        await self._element_repo.delete(mid)
        await self._element_repo.commit()
        logger.debug("Deleted element %s", mid)

    async def list_reservations(self) -> list[ElementRecord]:
        return await self._element_repo.list_reserved()

    async def list_sponsorships(self) -> list[SponsorshipRecord]:
        return await self._element_repo.list_sponsored()

    async def confirm(self, mid: str) -> ConfirmedSponsorship:
        """Mark the reservation of mid as sponsored.

        The caller must pass the result to deliver_certificate().
        """
        self.validate_mid(mid)
        element = await self._element_repo.get(mid)
        if element is None or element.reservation is None:
            raise ResourceNotFoundException("reservation", mid, "no reservation found")
        if not element.mail:
            raise ValidationException("reservation has no e-mail address", field="mail")

        certificate = await self._certificates.render(mid, element.name)
        try:
            await self._element_repo.confirm(mid)
            await self._element_repo.commit()
        except BaseException:
            certificate.cleanup()
            raise
        logger.info("Confirmed sponsorship of %s", mid)
        return ConfirmedSponsorship(certificate=certificate, name=element.name, mail=element.mail)

    async def deliver_certificate(self, confirmed: ConfirmedSponsorship) -> None:
        """Mail the certificate, then remove it. Delivery failures are logged only."""
        certificate = confirmed.certificate
        try:
            message = self._mail_templates.certificate_mail(
                certificate, confirmed.name, confirmed.mail
            )
            await self._mail_sender.send(message)
        except SponsorshipException as e:
            logger.error(
                "Certificate for %s not delivered to %s: %s (%s)",
                certificate.mid,
                confirmed.mail,
                e.message,
                e.details,
            )
        finally:
            certificate.cleanup()

    async def render_certificate(self, mid: str) -> Certificate:
        """Render the certificate of an existing element (re-issue on demand)."""
        self.validate_mid(mid)
        element = await self._element_repo.get(mid)
        if element is None:
            raise ValidationException("query doesn't include valid mid", field="mid")
        return await self._certificates.render(mid, element.name)
