"""Repositories over RowMapper. Methods return application DTOs."""

from sponsorship.infrastructure.persistence.repositories.base import BaseRepository
from sponsorship.infrastructure.persistence.repositories.element_repo import (
    ElementRepository,
)
from sponsorship.infrastructure.persistence.repositories.user_repo import UserRepository

__all__ = ["BaseRepository", "ElementRepository", "UserRepository"]
