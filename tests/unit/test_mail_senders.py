"""Tests for message building, SMTP failure mapping and sender selection."""

import smtplib
from pathlib import Path

import pytest

from sponsorship.application.dtos import MailMessage
from sponsorship.core.config import Settings
from sponsorship.domain.exceptions import MailDeliveryException
from sponsorship.infrastructure.external.mail import build_mail_sender
from sponsorship.infrastructure.external.mail.log_sender import LogOnlyMailSender
from sponsorship.infrastructure.external.mail.smtp_sender import SmtpMailSender


def _settings(**overrides: object) -> Settings:
    values: dict[str, object] = {
        "database_url": "sqlite+aiosqlite:///:memory:",
        "secret_key": "s3cret",
        "smtp_user": "patenschaft@example.org",
        "mail_from_name": "Klimaplus-Patenschaft",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)  # type: ignore[arg-type]


def test_build_includes_html_alternative_and_named_attachment(tmp_path: Path) -> None:
    pdf = tmp_path / "certificate.pdf"
    pdf.write_bytes(b"%PDF-1.4 test")
    message = MailMessage(
        to="ada@example.org",
        subject="Ihre Patenschaft",
        text="Hallo Ada",
        html="<p>Hallo Ada</p>",
        attachment=pdf,
        attachment_name="Patenschaft_pv-003.pdf",
    )

    msg = SmtpMailSender(_settings())._build(message)

    assert msg["To"] == "ada@example.org"
    assert "patenschaft@example.org" in msg["From"]
    attachments = list(msg.iter_attachments())
    assert [a.get_filename() for a in attachments] == ["Patenschaft_pv-003.pdf"]
    assert attachments[0].get_content() == b"%PDF-1.4 test"
    assert msg.get_body(preferencelist=("html",)) is not None


async def test_relay_failure_raises_mail_delivery_exception(monkeypatch: pytest.MonkeyPatch) -> None:
    def refuse(*args: object, **kwargs: object) -> None:
        raise ConnectionRefusedError("connection refused")

    monkeypatch.setattr(smtplib, "SMTP", refuse)
    sender = SmtpMailSender(_settings(smtp_use_ssl=False))
    message = MailMessage(to="ada@example.org", subject="s", text="t", html="<p>t</p>")

    with pytest.raises(MailDeliveryException) as exc_info:
        await sender.send(message)
    assert exc_info.value.details["recipient"] == "ada@example.org"


def test_build_mail_sender_follows_smtp_enabled() -> None:
    assert isinstance(build_mail_sender(_settings(smtp_enabled=True)), SmtpMailSender)
    assert isinstance(build_mail_sender(_settings(smtp_enabled=False)), LogOnlyMailSender)


async def test_log_only_sender_accepts_everything() -> None:
    message = MailMessage(to="ada@example.org", subject="s", text="t", html="<p>t</p>")
    await LogOnlyMailSender().send(message)
