"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, repositories, services and the
session guard. Shared collaborators (cache, mail sender, mail templates,
certificate renderer) live on app.state and are overridable in tests via
app.dependency_overrides.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Annotated

from fastapi import Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from sponsorship.application.dtos.user import UserRecord
from sponsorship.application.interfaces.services import (
    ICertificateRenderer,
    IMailSender,
    IMailTemplateRenderer,
)
from sponsorship.application.services import (
    AvailabilityService,
    ReservationService,
    SessionService,
    UserService,
)
from sponsorship.core.config import get_settings
from sponsorship.domain.exceptions import AuthenticationException
from sponsorship.infrastructure.cache.cache_protocol import CacheProtocol
from sponsorship.infrastructure.persistence.database import get_db
from sponsorship.infrastructure.persistence.repositories import (
    ElementRepository,
    UserRepository,
)

DbSession = Annotated[AsyncSession, Depends(get_db)]


def get_cache(request: Request) -> CacheProtocol:
    return request.app.state.cache


def get_mail_sender(request: Request) -> IMailSender:
    return request.app.state.mail_sender


def get_mail_templates(request: Request) -> IMailTemplateRenderer:
    return request.app.state.mail_templates


def get_certificate_renderer(request: Request) -> ICertificateRenderer:
    return request.app.state.certificate_renderer


def get_user_repo(db: DbSession) -> UserRepository:
    return UserRepository(db)


def get_element_repo(
    db: DbSession,
    cache: Annotated[CacheProtocol, Depends(get_cache)],
) -> ElementRepository:
    return ElementRepository(db, cache)


def get_availability_service(
    element_repo: Annotated[ElementRepository, Depends(get_element_repo)],
    cache: Annotated[CacheProtocol, Depends(get_cache)],
) -> AvailabilityService:
    settings = get_settings()
    return AvailabilityService(
        element_repo,
        cache,
        ttl_seconds=settings.cache_ttl_seconds,
        reservation_expiration=timedelta(hours=settings.reservation_expiration_hours),
    )


def get_reservation_service(
    element_repo: Annotated[ElementRepository, Depends(get_element_repo)],
    availability: Annotated[AvailabilityService, Depends(get_availability_service)],
    mail_sender: Annotated[IMailSender, Depends(get_mail_sender)],
    mail_templates: Annotated[IMailTemplateRenderer, Depends(get_mail_templates)],
    certificate_renderer: Annotated[ICertificateRenderer, Depends(get_certificate_renderer)],
) -> ReservationService:
    return ReservationService(
        element_repo,
        availability,
        mail_sender,
        mail_templates,
        certificate_renderer,
        element_ranges=get_settings().element_ranges,
    )


def get_session_service(
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
) -> SessionService:
    return SessionService(user_repo, admin_username=get_settings().admin_username)


def get_user_service(
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
) -> UserService:
    return UserService(user_repo, admin_username=get_settings().admin_username)


# ---- Session cookie ----


def get_session_token(request: Request) -> str | None:
    return request.cookies.get(get_settings().session_cookie_name)


def set_session_cookie(response: Response, token: str) -> None:
    """HttpOnly, SameSite=strict cookie living as long as the token."""
    settings = get_settings()
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_expire_minutes * 60,
        httponly=True,
        samesite="strict",
        secure=settings.session_cookie_secure,
    )


def clear_session_cookie(response: Response) -> None:
    settings = get_settings()
    response.delete_cookie(
        key=settings.session_cookie_name,
        httponly=True,
        samesite="strict",
        secure=settings.session_cookie_secure,
    )


# ---- Guards ----


async def get_optional_user(
    token: Annotated[str | None, Depends(get_session_token)],
    sessions: Annotated[SessionService, Depends(get_session_service)],
) -> UserRecord | None:
    return await sessions.check_user(token)


async def require_user(
    response: Response,
    token: Annotated[str | None, Depends(get_session_token)],
    sessions: Annotated[SessionService, Depends(get_session_service)],
) -> UserRecord:
    """Authenticated user or 401. Re-sets the cookie so the session slides."""
    user = await sessions.check_user(token)
    if user is None or token is None:
        raise AuthenticationException()
    set_session_cookie(response, token)
    return user


async def require_admin(
    token: Annotated[str | None, Depends(get_session_token)],
    sessions: Annotated[SessionService, Depends(get_session_service)],
) -> UserRecord:
    user = await sessions.check_admin(token)
    if user is None:
        raise AuthenticationException()
    return user


CurrentUser = Annotated[UserRecord, Depends(require_user)]
AdminUser = Annotated[UserRecord, Depends(require_admin)]
