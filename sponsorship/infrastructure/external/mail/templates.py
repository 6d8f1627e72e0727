"""Mail templates: template key -> subject / plain text / HTML (Jinja).

Context for every template: mid, name (sponsor), element_type ("PV-Modul"),
element_article ("das") and element_number ("003").
"""

from __future__ import annotations

from typing import Any

from jinja2 import Environment, Template

from sponsorship.application.dtos.mail import Certificate, MailMessage
from sponsorship.domain.mnemonic import element_article, element_number, element_type

# key -> (subject, text, html)
_DEFAULT_TEMPLATES: dict[str, tuple[str, str, str]] = {
    "reservation": (
        "Reservierung {{ element_type }} {{ element_number }}",
        "Hallo {{ name }},\n\n"
        "vielen Dank für Ihr Interesse an einer Klimaplus-Patenschaft! "
        "Wir haben {{ element_article }} {{ element_type }} {{ element_number }} "
        "für Sie reserviert.\n\n"
        "Sobald Ihre Spende eingegangen ist, bestätigen wir die Patenschaft "
        "und senden Ihnen Ihre Urkunde zu.\n\n"
        "Ihr Klimaplus-Team\n",
        "<p>Hallo {{ name }},</p>\n"
        "<p>vielen Dank für Ihr Interesse an einer Klimaplus-Patenschaft! "
        "Wir haben {{ element_article }} <b>{{ element_type }} {{ element_number }}</b> "
        "für Sie reserviert.</p>\n"
        "<p>Sobald Ihre Spende eingegangen ist, bestätigen wir die Patenschaft "
        "und senden Ihnen Ihre Urkunde zu.</p>\n"
        "<p>Ihr Klimaplus-Team</p>\n",
    ),
    "certificate": (
        "Ihre Patenschaft für {{ element_type }} {{ element_number }}",
        "Hallo {{ name }},\n\n"
        "Ihre Patenschaft für {{ element_article }} {{ element_type }} "
        "{{ element_number }} ist bestätigt. Im Anhang finden Sie Ihre Urkunde.\n\n"
        "Herzlichen Dank für Ihre Unterstützung!\n\n"
        "Ihr Klimaplus-Team\n",
        "<p>Hallo {{ name }},</p>\n"
        "<p>Ihre Patenschaft für {{ element_article }} "
        "<b>{{ element_type }} {{ element_number }}</b> ist bestätigt. "
        "Im Anhang finden Sie Ihre Urkunde.</p>\n"
        "<p>Herzlichen Dank für Ihre Unterstützung!</p>\n"
        "<p>Ihr Klimaplus-Team</p>\n",
    ),
}


def template_context(mid: str, name: str) -> dict[str, Any]:
    """Values shared by mail and certificate templates."""
    return {
        "mid": mid,
        "name": name,
        "element_type": element_type(mid),
        "element_article": element_article(mid),
        "element_number": element_number(mid),
    }


class MailTemplateRenderer:
    """Renders reservation and certificate mails from in-repo templates.

    Subject and plain text are rendered without escaping; the HTML part is
    autoescaped since the sponsor name is user input.
    """

    def __init__(self, templates: dict[str, tuple[str, str, str]] | None = None) -> None:
        self._templates = templates or _DEFAULT_TEMPLATES
        plain = Environment(autoescape=False)
        html = Environment(autoescape=True)
        self._compiled: dict[str, tuple[Template, Template, Template]] = {
            key: (plain.from_string(sub), plain.from_string(text), html.from_string(body))
            for key, (sub, text, body) in self._templates.items()
        }

    def render(self, template_key: str, mid: str, name: str) -> tuple[str, str, str]:
        """Return (subject, text, html). Raises KeyError if key unknown."""
        if template_key not in self._compiled:
            raise KeyError(f"Unknown mail template: {template_key}")
        ctx = template_context(mid, name)
        subject_tpl, text_tpl, html_tpl = self._compiled[template_key]
        return (
            subject_tpl.render(**ctx).strip(),
            text_tpl.render(**ctx),
            html_tpl.render(**ctx),
        )

    def reservation_mail(self, mid: str, name: str, to: str) -> MailMessage:
        subject, text, html = self.render("reservation", mid, name)
        return MailMessage(to=to, subject=subject, text=text, html=html)

    def certificate_mail(self, certificate: Certificate, name: str, to: str) -> MailMessage:
        subject, text, html = self.render("certificate", certificate.mid, name)
        return MailMessage(
            to=to,
            subject=subject,
            text=text,
            html=html,
            attachment=certificate.path,
            attachment_name=certificate.filename,
        )
