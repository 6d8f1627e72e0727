"""Log-only mail sender for development and when SMTP is disabled."""

from __future__ import annotations

import logging

from sponsorship.application.dtos.mail import MailMessage

logger = logging.getLogger(__name__)


class LogOnlyMailSender:
    """IMailSender implementation that logs instead of sending e-mail."""

    async def send(self, message: MailMessage) -> None:
        logger.info(
            "Mail: would send to %s (subject=%r, attachment=%s)",
            message.to,
            message.subject[:80],
            message.attachment.name if message.attachment else None,
        )
        logger.debug("Mail body (first 500 chars): %s", message.text[:500])
