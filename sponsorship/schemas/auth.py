"""Session API schemas (welcome, login, logout, own password)."""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Request body for POST /login."""

    user: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class SessionResponse(BaseModel):
    """Login state of the caller. uid and name are null when logged out."""

    uid: int | None = None
    name: str | None = None
    logged_in: bool = False


class PasswordChangeRequest(BaseModel):
    """Request body for PATCH /user/password and PATCH /users. Length rules are checked by the service."""

    password: str
