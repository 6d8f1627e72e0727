"""User ORM model. Table: users."""

from sqlalchemy import Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column

from sponsorship.infrastructure.persistence.database import Base


class User(Base):
    """Login account. tid is the token version; bumping it revokes all sessions."""

    __tablename__ = "users"

    uid: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    password: Mapped[str] = mapped_column(String(128), nullable=False)
    tid: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default=text("0")
    )
