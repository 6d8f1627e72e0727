"""initial_schema_users_elements

Revision ID: 4f2a9c1d7e30
Revises:
Create Date: 2026-03-02 10:14:51.208113

"""

from collections.abc import Sequence
from typing import Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "4f2a9c1d7e30"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "users",
        sa.Column("uid", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=64), nullable=False),
        sa.Column("password", sa.String(length=128), nullable=False),
        sa.Column("tid", sa.Integer(), server_default="0", nullable=False),
        sa.PrimaryKeyConstraint("uid"),
        sa.UniqueConstraint("name"),
    )
    op.create_table(
        "elements",
        sa.Column("mid", sa.String(length=16), nullable=False),
        sa.Column("name", sa.String(length=256), nullable=False),
        sa.Column("reservation", sa.DateTime(timezone=True), nullable=True),
        sa.Column("mail", sa.String(length=320), nullable=True),
        sa.PrimaryKeyConstraint("mid"),
    )
    op.create_index(
        op.f("ix_elements_reservation"), "elements", ["reservation"], unique=False
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f("ix_elements_reservation"), table_name="elements")
    op.drop_table("elements")
    op.drop_table("users")
