"""Service interfaces (ports) for the application layer.

Protocols define contracts for the external collaborators: the snapshot
cache, the mail relay, the mail templates and the certificate typesetter.
"""

from __future__ import annotations

from typing import Any, Protocol

from sponsorship.application.dtos.mail import Certificate, MailMessage


class IMailSender(Protocol):
    """Protocol for delivering a rendered e-mail."""

    async def send(self, message: MailMessage) -> None:
        """Send message; raise MailDeliveryException on failure."""


class IMailTemplateRenderer(Protocol):
    """Protocol for building the reservation and certificate mails."""

    def reservation_mail(self, mid: str, name: str, to: str) -> MailMessage:
        """Mail confirming that mid was reserved for name."""

    def certificate_mail(self, certificate: Certificate, name: str, to: str) -> MailMessage:
        """Mail delivering the certificate PDF as attachment."""


class ICertificateRenderer(Protocol):
    """Protocol for rendering a sponsorship certificate PDF."""

    async def render(self, mid: str, name: str) -> Certificate:
        """Render the certificate; raise CertificateException on failure.

        The caller owns the result and must call cleanup() on it.
        """


class ICacheService(Protocol):
    """Protocol for the availability snapshot cache."""

    async def get(self, key: str) -> Any:
        """Return cached value or None."""

    async def set(self, key: str, value: Any, ttl: int = 300) -> bool:
        """Store value with TTL. Returns True on success."""

    async def delete(self, key: str) -> bool:
        """Delete key. False only if the backend could not be reached."""
