"""add users and sessions

Revision ID: 8f04d2b9e613
Revises: 5c1e0a7f2b41
Create Date: 2022-06-05 06:27:20.000000

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "8f04d2b9e613"
down_revision: Union[str, Sequence[str], None] = "5c1e0a7f2b41"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

PRIVILEGE_LEVELS = ("admin", "mod")


def _privilege_level_type(bind) -> sa.types.TypeEngine:
    if bind.dialect.name == "postgresql":
        postgresql.ENUM(*PRIVILEGE_LEVELS, name="privilege_level").create(bind, checkfirst=True)
        return postgresql.ENUM(*PRIVILEGE_LEVELS, name="privilege_level", create_type=False)
    return sa.Enum(*PRIVILEGE_LEVELS, name="privilege_level", create_constraint=True)


def upgrade() -> None:
    """Create the privilege enumeration, users and sessions."""
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    level_type = _privilege_level_type(bind)

    if not inspector.has_table("users"):
        op.create_table(
            "users",
            sa.Column("id", sa.Uuid(), nullable=False),
            sa.Column("name", sa.String(length=255), nullable=False),
            sa.Column("password", sa.LargeBinary(), nullable=False),
            sa.Column("level", level_type, nullable=False),
            sa.PrimaryKeyConstraint("id", "name"),
            sa.UniqueConstraint("id"),
            sa.UniqueConstraint("name"),
        )

    if not inspector.has_table("sessions"):
        op.create_table(
            "sessions",
            sa.Column("id", sa.Uuid(), nullable=False),
            sa.Column("uid", sa.Uuid(), nullable=False),
            sa.Column(
                "logged_in_at",
                sa.DateTime(),
                nullable=False,
                server_default=sa.func.now(),
            ),
            sa.PrimaryKeyConstraint("id"),
            sa.ForeignKeyConstraint(["uid"], ["users.id"]),
        )


def downgrade() -> None:
    """Drop sessions, users and the enumeration type."""
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    if inspector.has_table("sessions"):
        op.drop_table("sessions")
    if inspector.has_table("users"):
        op.drop_table("users")
    if bind.dialect.name == "postgresql":
        postgresql.ENUM(name="privilege_level").drop(bind, checkfirst=True)
