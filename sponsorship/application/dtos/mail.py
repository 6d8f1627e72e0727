"""Outgoing mail and rendered certificate DTOs."""

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MailMessage:
    """A rendered e-mail: plain text body with an HTML alternative."""

    to: str
    subject: str
    text: str
    html: str
    attachment: Path | None = None
    attachment_name: str | None = None


@dataclass(frozen=True)
class Certificate:
    """A rendered certificate PDF inside a private working directory."""

    mid: str
    path: Path
    workdir: Path

    @property
    def filename(self) -> str:
        return f"Patenschaft_{self.mid}.pdf"

    def cleanup(self) -> None:
        """Remove the working directory and everything in it."""
        shutil.rmtree(self.workdir, ignore_errors=True)
        logger.debug("Removed certificate workdir %s", self.workdir)
