"""Sponsorship certificates compiled by the Typst command line tool.

The Typst source is rendered from a Jinja template (element labels only);
the sponsor name is passed with ``--input`` so user input never becomes
Typst markup. Every render gets its own temporary directory, removed by
Certificate.cleanup().
"""

from __future__ import annotations

import asyncio
import logging
import tempfile
from pathlib import Path

import aiofiles
from jinja2 import Environment

from sponsorship.application.dtos.mail import Certificate
from sponsorship.core.config import Settings, get_settings
from sponsorship.domain.exceptions import CertificateException
from sponsorship.infrastructure.external.mail.templates import template_context

logger = logging.getLogger(__name__)

_DEFAULT_TEMPLATE = """\
#set page(paper: "a4", margin: 2.5cm)
#set text(font: "Linux Libertine", size: 14pt, lang: "de")
#align(center)[
  #v(3cm)
  #text(size: 32pt, weight: "bold")[Urkunde]
  #v(1cm)
  #text(size: 18pt)[Klimaplus-Patenschaft]
  #v(2cm)
  Hiermit wird bestätigt, dass
  #v(0.5cm)
  #text(size: 22pt, weight: "bold")[#sys.inputs.name]
  #v(0.5cm)
  die Patenschaft für {{ element_article }} {{ element_type }}
  #text(weight: "bold")[{{ element_number }}] übernommen hat.
  #v(2cm)
  Herzlichen Dank für Ihre Unterstützung!
]
"""


class TypstCertificateRenderer:
    """ICertificateRenderer running ``<command> compile`` in a subprocess."""

    def __init__(self, settings: Settings | None = None) -> None:
        s = settings or get_settings()
        self.command = s.certificate_command
        self.timeout = s.certificate_timeout_seconds
        source = (
            Path(s.certificate_template).read_text(encoding="utf-8")
            if s.certificate_template
            else _DEFAULT_TEMPLATE
        )
        self._template = Environment(autoescape=False).from_string(source)

    async def render(self, mid: str, name: str) -> Certificate:
        workdir = Path(tempfile.mkdtemp(prefix="certificate-"))
        certificate = Certificate(mid=mid, path=workdir / "certificate.pdf", workdir=workdir)
        try:
            await self._compile(certificate, name)
        except BaseException:
            certificate.cleanup()
            raise
        logger.info("Rendered certificate for %s", mid)
        return certificate

    async def _compile(self, certificate: Certificate, name: str) -> None:
        source_path = certificate.workdir / "certificate.typ"
        async with aiofiles.open(source_path, "w", encoding="utf-8") as f:
            await f.write(self._template.render(**template_context(certificate.mid, name)))
        try:
            proc = await asyncio.create_subprocess_exec(
                self.command,
                "compile",
                "--input",
                f"name={name}",
                str(source_path),
                str(certificate.path),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise CertificateException(certificate.mid, f"can't run {self.command}: {e}") from e
        try:
            _, stderr = await asyncio.wait_for(proc.communicate(), timeout=self.timeout)
        except TimeoutError:
            proc.kill()
            await proc.wait()
            raise CertificateException(certificate.mid, "typesetter timed out") from None
        if proc.returncode != 0 or not certificate.path.exists():
            reason = stderr.decode("utf-8", errors="replace").strip()
            logger.error("Typst failed for %s (exit %s): %s", certificate.mid, proc.returncode, reason)
            raise CertificateException(certificate.mid, reason or f"exit status {proc.returncode}")
