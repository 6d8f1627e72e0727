"""ORM models (table definitions). Rows are read and written through RowMapper."""

from sponsorship.infrastructure.persistence.models.element import Element
from sponsorship.infrastructure.persistence.models.user import User

__all__ = ["Element", "User"]
