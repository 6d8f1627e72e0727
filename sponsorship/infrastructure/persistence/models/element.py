"""Element ORM model. Table: elements."""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from sponsorship.infrastructure.persistence.database import Base


class Element(Base):
    """A reserved or sponsored element. Available elements have no row.

    reservation is set while the sponsorship is pending and cleared (together
    with mail) once it is confirmed.
    """

    __tablename__ = "elements"

    mid: Mapped[str] = mapped_column(String(16), primary_key=True)
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    reservation: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, index=True
    )
    mail: Mapped[str | None] = mapped_column(String(320), nullable=True)
