"""Application interfaces (ports): repository and service protocols.

No runtime imports from sponsorship.infrastructure.
"""

from sponsorship.application.interfaces.repositories import (
    IElementRepository,
    IUserRepository,
)
from sponsorship.application.interfaces.services import (
    ICacheService,
    ICertificateRenderer,
    IMailSender,
    IMailTemplateRenderer,
)

__all__ = [
    "ICacheService",
    "ICertificateRenderer",
    "IElementRepository",
    "IMailSender",
    "IMailTemplateRenderer",
    "IUserRepository",
]
