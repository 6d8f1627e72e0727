"""Mail: templates, SMTP sender and a log-only sender for development."""

from sponsorship.infrastructure.external.mail.log_sender import LogOnlyMailSender
from sponsorship.infrastructure.external.mail.smtp_sender import SmtpMailSender, build_mail_sender
from sponsorship.infrastructure.external.mail.templates import MailTemplateRenderer

__all__ = [
    "LogOnlyMailSender",
    "MailTemplateRenderer",
    "SmtpMailSender",
    "build_mail_sender",
]
