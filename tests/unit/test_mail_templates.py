"""Tests for mail template rendering."""

from pathlib import Path

import pytest

from sponsorship.application.dtos import Certificate
from sponsorship.infrastructure.external.mail.templates import (
    MailTemplateRenderer,
    template_context,
)


def test_template_context_labels() -> None:
    assert template_context("pv-003", "Ada") == {
        "mid": "pv-003",
        "name": "Ada",
        "element_type": "PV-Modul",
        "element_article": "das",
        "element_number": "003",
    }
    assert template_context("bs-010", "Ada")["element_type"] == "Batteriespeicher"


def test_reservation_mail() -> None:
    message = MailTemplateRenderer().reservation_mail("pv-003", "Ada", "ada@example.org")
    assert message.to == "ada@example.org"
    assert message.subject == "Reservierung PV-Modul 003"
    assert "Hallo Ada" in message.text
    assert "das PV-Modul 003" in message.text
    assert message.attachment is None


def test_sponsor_name_is_escaped_in_html_only() -> None:
    message = MailTemplateRenderer().reservation_mail("pv-003", "<b>Ada</b>", "ada@example.org")
    assert "&lt;b&gt;Ada&lt;/b&gt;" in message.html
    assert "<b>Ada</b>" in message.text


def test_certificate_mail_attaches_certificate(tmp_path: Path) -> None:
    certificate = Certificate(mid="bs-010", path=tmp_path / "c.pdf", workdir=tmp_path)
    message = MailTemplateRenderer().certificate_mail(certificate, "Ben", "ben@example.org")
    assert message.attachment == tmp_path / "c.pdf"
    assert message.attachment_name == "Patenschaft_bs-010.pdf"
    assert message.subject == "Ihre Patenschaft für Batteriespeicher 010"
    assert "den Batteriespeicher 010" in message.text


def test_custom_templates_and_unknown_key() -> None:
    renderer = MailTemplateRenderer({"hello": ("Hi {{ name }}", "{{ mid }}", "<i>{{ mid }}</i>")})
    assert renderer.render("hello", "pv-001", "Ada") == ("Hi Ada", "pv-001", "<i>pv-001</i>")
    with pytest.raises(KeyError):
        renderer.render("reservation", "pv-001", "Ada")
