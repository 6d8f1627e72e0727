"""Adapters implement every method of the application-layer protocols."""

import inspect

import pytest

from sponsorship.application.interfaces import (
    ICacheService,
    ICertificateRenderer,
    IElementRepository,
    IMailSender,
    IMailTemplateRenderer,
    IUserRepository,
)
from sponsorship.infrastructure.cache.memory_cache import MemoryCacheService
from sponsorship.infrastructure.cache.redis_cache import CacheService
from sponsorship.infrastructure.external.certificates.typst_renderer import (
    TypstCertificateRenderer,
)
from sponsorship.infrastructure.external.mail.log_sender import LogOnlyMailSender
from sponsorship.infrastructure.external.mail.smtp_sender import SmtpMailSender
from sponsorship.infrastructure.external.mail.templates import MailTemplateRenderer
from sponsorship.infrastructure.persistence.repositories import (
    ElementRepository,
    UserRepository,
)


def _protocol_methods(protocol: type) -> list[str]:
    return [
        name
        for name, member in vars(protocol).items()
        if not name.startswith("_") and inspect.isfunction(member)
    ]


def _params(func) -> list[str]:
    return [p for p in inspect.signature(func).parameters if p != "self"]


@pytest.mark.parametrize(
    ("protocol", "implementation"),
    [
        (IElementRepository, ElementRepository),
        (IUserRepository, UserRepository),
        (ICacheService, MemoryCacheService),
        (ICacheService, CacheService),
        (IMailSender, SmtpMailSender),
        (IMailSender, LogOnlyMailSender),
        (IMailTemplateRenderer, MailTemplateRenderer),
        (ICertificateRenderer, TypstCertificateRenderer),
    ],
)
def test_implementation_matches_protocol(protocol: type, implementation: type):
    methods = _protocol_methods(protocol)
    assert methods
    for name in methods:
        impl = getattr(implementation, name, None)
        assert impl is not None, f"{implementation.__name__} lacks {name}"
        expected = getattr(protocol, name)
        assert inspect.iscoroutinefunction(impl) == inspect.iscoroutinefunction(expected), name
        assert _params(impl) == _params(expected), name
