"""Session API: welcome, login, logout and changing the own password.

The session token travels in an HttpOnly cookie; see
sponsorship.api.dependencies for the cookie helpers and guards.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from sponsorship.api.dependencies import (
    CurrentUser,
    clear_session_cookie,
    get_optional_user,
    get_session_service,
    get_user_service,
    set_session_cookie,
)
from sponsorship.application.dtos.user import UserRecord
from sponsorship.application.services import SessionService, UserService
from sponsorship.core.limiter import limit_auth
from sponsorship.schemas.auth import LoginRequest, PasswordChangeRequest, SessionResponse

router = APIRouter()


@router.get("/welcome", response_model=SessionResponse)
async def welcome(
    user: Annotated[UserRecord | None, Depends(get_optional_user)],
) -> SessionResponse:
    """Login state of the caller; logged_in is false without a valid session."""
    if user is None:
        return SessionResponse()
    return SessionResponse(uid=user.uid, name=user.name, logged_in=True)


@router.post("/login", response_model=SessionResponse)
@limit_auth
async def login(
    request: Request,
    response: Response,
    body: LoginRequest,
    sessions: Annotated[SessionService, Depends(get_session_service)],
) -> SessionResponse:
    """Check credentials and set the session cookie.

    Unknown user and wrong password both answer 401 with the same message.
    """
    user, token = await sessions.login(body.user, body.password)
    set_session_cookie(response, token)
    return SessionResponse(uid=user.uid, name=user.name, logged_in=True)


@router.get("/logout", response_model=SessionResponse)
async def logout(response: Response) -> SessionResponse:
    clear_session_cookie(response)
    return SessionResponse()


@router.patch("/user/password", response_model=SessionResponse)
async def change_own_password(
    response: Response,
    body: PasswordChangeRequest,
    user: CurrentUser,
    users: Annotated[UserService, Depends(get_user_service)],
    sessions: Annotated[SessionService, Depends(get_session_service)],
) -> SessionResponse:
    """Change the caller's password.

    All other sessions of the user are revoked; the caller gets a fresh cookie.
    """
    await users.change_password(user.uid, body.password)
    set_session_cookie(response, await sessions.reissue(user.uid))
    return SessionResponse(uid=user.uid, name=user.name, logged_in=True)
