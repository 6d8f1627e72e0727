"""Users API (admin): list, create, change password, delete."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from sponsorship.api.dependencies import AdminUser, get_user_service
from sponsorship.application.services import UserService
from sponsorship.schemas.auth import PasswordChangeRequest
from sponsorship.schemas.user import UserCreateRequest, UserResponse

router = APIRouter()

Uid = Annotated[int, Query(ge=0)]


async def _listing(users: UserService) -> list[UserResponse]:
    return [UserResponse.model_validate(u) for u in await users.list_users()]


@router.get("", response_model=list[UserResponse])
async def list_users(
    admin: AdminUser,
    users: Annotated[UserService, Depends(get_user_service)],
) -> list[UserResponse]:
    return await _listing(users)


@router.post("", response_model=list[UserResponse])
async def create_user(
    body: UserCreateRequest,
    admin: AdminUser,
    users: Annotated[UserService, Depends(get_user_service)],
) -> list[UserResponse]:
    """Create a user; duplicate names answer 400."""
    await users.create_user(body.name, body.password)
    return await _listing(users)


@router.patch("", response_model=list[UserResponse])
async def set_user_password(
    uid: Uid,
    body: PasswordChangeRequest,
    admin: AdminUser,
    users: Annotated[UserService, Depends(get_user_service)],
) -> list[UserResponse]:
    """Set a new password for uid, revoking that user's sessions."""
    await users.change_password(uid, body.password)
    return await _listing(users)


@router.delete("", response_model=list[UserResponse])
async def delete_user(
    uid: Uid,
    admin: AdminUser,
    users: Annotated[UserService, Depends(get_user_service)],
) -> list[UserResponse]:
    await users.delete_user(uid)
    return await _listing(users)
