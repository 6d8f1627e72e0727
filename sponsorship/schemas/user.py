"""User administration API schemas."""

from pydantic import BaseModel, ConfigDict, Field


class UserCreateRequest(BaseModel):
    """Request body for POST /users. Password length is checked by the service."""

    name: str = Field(..., min_length=1, max_length=64)
    password: str


class UserResponse(BaseModel):
    """User listing entry (never includes the password hash)."""

    uid: int
    name: str

    model_config = ConfigDict(from_attributes=True)
