"""SMTP mail sender.

smtplib is blocking, so each delivery runs in a worker thread. One
connection per message; no retries.
"""

from __future__ import annotations

import asyncio
import logging
import smtplib
from email.message import EmailMessage
from email.utils import formataddr

from sponsorship.application.dtos.mail import MailMessage
from sponsorship.application.interfaces.services import IMailSender
from sponsorship.core.config import Settings, get_settings
from sponsorship.domain.exceptions import MailDeliveryException
from sponsorship.infrastructure.external.mail.log_sender import LogOnlyMailSender

logger = logging.getLogger(__name__)


class SmtpMailSender:
    """IMailSender delivering through the configured SMTP relay."""

    def __init__(self, settings: Settings | None = None) -> None:
        s = settings or get_settings()
        self.host = s.smtp_host
        self.port = s.smtp_port
        self.use_tls = s.smtp_use_tls
        self.use_ssl = s.smtp_use_ssl
        self.username = s.smtp_user
        self.password = s.smtp_password.get_secret_value() if s.smtp_password else ""
        self.from_address = s.sender_address
        self.from_name = s.mail_from_name

    def _build(self, message: MailMessage) -> EmailMessage:
        msg = EmailMessage()
        msg["Subject"] = message.subject
        msg["From"] = formataddr((self.from_name, self.from_address))
        msg["To"] = message.to
        msg.set_content(message.text)
        msg.add_alternative(message.html, subtype="html")
        if message.attachment is not None:
            msg.add_attachment(
                message.attachment.read_bytes(),
                maintype="application",
                subtype="pdf",
                filename=message.attachment_name or message.attachment.name,
            )
        return msg

    def _send_sync(self, message: MailMessage) -> None:
        msg = self._build(message)
        if self.use_ssl:
            server: smtplib.SMTP = smtplib.SMTP_SSL(self.host, self.port, timeout=30)
        else:
            server = smtplib.SMTP(self.host, self.port, timeout=30)
        with server:
            if self.use_tls and not self.use_ssl:
                server.starttls()
            if self.username:
                server.login(self.username, self.password)
            server.send_message(msg)

    async def send(self, message: MailMessage) -> None:
        try:
            await asyncio.to_thread(self._send_sync, message)
        except (smtplib.SMTPException, OSError) as e:
            logger.error("Failed to send mail to %s: %s", message.to, e)
            raise MailDeliveryException(message.to, str(e)) from e
        logger.info("Mail sent to %s (subject=%r)", message.to, message.subject)


def build_mail_sender(settings: Settings | None = None) -> IMailSender:
    """SMTP sender when smtp_enabled, else a log-only sender."""
    settings = settings or get_settings()
    if settings.smtp_enabled:
        return SmtpMailSender(settings)
    logger.warning("SMTP disabled; mails are logged instead of sent")
    return LogOnlyMailSender()
