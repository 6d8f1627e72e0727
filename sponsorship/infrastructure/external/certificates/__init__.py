"""Certificate rendering (Typst)."""

from sponsorship.infrastructure.external.certificates.typst_renderer import TypstCertificateRenderer

__all__ = ["TypstCertificateRenderer"]
