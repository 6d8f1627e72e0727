"""Pytest configuration and fixtures for the sponsorship backend.

Runs against in-memory SQLite (aiosqlite, StaticPool) with a fresh schema
and a fresh in-memory cache per test. Mail delivery and certificate
rendering are replaced by recording fakes through dependency_overrides.
"""

import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key-not-for-production"
os.environ["CACHE_BACKEND"] = "memory"
os.environ["SMTP_ENABLED"] = "false"
os.environ["LOG_FILE"] = ""

import shutil  # noqa: E402
import tempfile  # noqa: E402
from collections.abc import AsyncIterator, Iterator  # noqa: E402
from pathlib import Path  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from sponsorship.api.dependencies import (  # noqa: E402
    get_certificate_renderer,
    get_mail_sender,
)
from sponsorship.application.dtos.mail import Certificate, MailMessage  # noqa: E402
from sponsorship.core.config import get_settings  # noqa: E402
from sponsorship.core.limiter import limiter  # noqa: E402
from sponsorship.domain.exceptions import (  # noqa: E402
    CertificateException,
    MailDeliveryException,
)
from sponsorship.infrastructure.cache import MemoryCacheService  # noqa: E402
from sponsorship.infrastructure.persistence import models  # noqa: E402, F401
from sponsorship.infrastructure.persistence.database import (  # noqa: E402
    Base,
    dispose_engine,
    get_engine,
    get_session_factory,
)
from sponsorship.infrastructure.persistence.repositories import UserRepository  # noqa: E402
from sponsorship.main import app  # noqa: E402

ADMIN_PASSWORD = "admin-password-1234"
USER_PASSWORD = "user-password-1234"


class FakeMailSender:
    """Records sent messages; raises MailDeliveryException while fail is set."""

    def __init__(self) -> None:
        self.sent: list[MailMessage] = []
        self.attempts = 0
        self.fail = False

    async def send(self, message: MailMessage) -> None:
        self.attempts += 1
        if self.fail:
            raise MailDeliveryException(message.to, "relay refused")
        self.sent.append(message)


class FakeCertificateRenderer:
    """Writes a tiny PDF into a private temp dir; raises CertificateException while fail is set."""

    def __init__(self) -> None:
        self.rendered: list[tuple[str, str]] = []
        self.certificates: list[Certificate] = []
        self.fail = False

    async def render(self, mid: str, name: str) -> Certificate:
        self.rendered.append((mid, name))
        if self.fail:
            raise CertificateException(mid, "typesetter missing")
        workdir = Path(tempfile.mkdtemp(prefix="test-certificate-"))
        path = workdir / "certificate.pdf"
        path.write_bytes(b"%PDF-1.4\n% test certificate for " + name.encode() + b"\n%%EOF\n")
        certificate = Certificate(mid=mid, path=path, workdir=workdir)
        self.certificates.append(certificate)
        return certificate


@pytest.fixture(autouse=True)
async def fresh_state() -> AsyncIterator[None]:
    """New in-memory database, empty cache and reset rate limits for every test.

    The engine is disposed afterwards, which drops the in-memory database and
    keeps connections from outliving the test's event loop.
    """
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    app.state.cache = MemoryCacheService(maxsize=get_settings().cache_max_entries)
    limiter.reset()
    yield
    app.dependency_overrides.clear()
    await dispose_engine()


@pytest.fixture
def mail_sender() -> FakeMailSender:
    sender = FakeMailSender()
    app.dependency_overrides[get_mail_sender] = lambda: sender
    return sender


@pytest.fixture
def certificate_renderer() -> Iterator[FakeCertificateRenderer]:
    renderer = FakeCertificateRenderer()
    app.dependency_overrides[get_certificate_renderer] = lambda: renderer
    yield renderer
    for certificate in renderer.certificates:
        shutil.rmtree(certificate.workdir, ignore_errors=True)


@pytest.fixture
async def client(
    mail_sender: FakeMailSender, certificate_renderer: FakeCertificateRenderer
) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
async def db_session() -> AsyncIterator[AsyncSession]:
    """Session for repository tests; uncommitted work is rolled back on close."""
    async with get_session_factory()() as session:
        yield session


async def create_user(name: str, password: str) -> int:
    """Insert a user directly and return its uid."""
    async with get_session_factory()() as session:
        repo = UserRepository(session)
        await repo.create_user(name, password)
        await repo.commit()
        user = await repo.get_by_name(name)
        assert user is not None
        return user.uid


async def login(client: AsyncClient, name: str, password: str) -> str:
    """Log in through the API and return the session token."""
    response = await client.post("/api/login", json={"user": name, "password": password})
    assert response.status_code == 200, response.text
    return response.cookies[get_settings().session_cookie_name]


@pytest.fixture
async def user_client(client: AsyncClient) -> AsyncClient:
    """Client logged in as a regular user."""
    await create_user("alice", USER_PASSWORD)
    await login(client, "alice", USER_PASSWORD)
    return client


@pytest.fixture
async def admin_client(client: AsyncClient) -> AsyncClient:
    """Client logged in as the admin account."""
    await create_user(get_settings().admin_username, ADMIN_PASSWORD)
    await login(client, get_settings().admin_username, ADMIN_PASSWORD)
    return client
