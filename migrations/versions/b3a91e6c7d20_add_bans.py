"""add bans and post addresses

Revision ID: b3a91e6c7d20
Revises: 8f04d2b9e613
Create Date: 2022-06-05 14:42:29.000000

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from chanboard.db.types import InetAddress

# revision identifiers, used by Alembic.
revision: str = "b3a91e6c7d20"
down_revision: Union[str, Sequence[str], None] = "8f04d2b9e613"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _posts_columns(inspector) -> set[str]:
    return {col["name"] for col in inspector.get_columns("posts")}


def upgrade() -> None:
    """Create bans and add the required origin address to posts."""
    bind = op.get_bind()
    inspector = sa.inspect(bind)

    if not inspector.has_table("bans"):
        op.create_table(
            "bans",
            sa.Column("ip", InetAddress, nullable=False),
            sa.Column(
                "created_at",
                sa.DateTime(),
                nullable=False,
                server_default=sa.func.now(),
            ),
            sa.Column("duration", sa.Interval(), nullable=False),
            sa.Column("reason", sa.String(length=256), nullable=False),
            sa.PrimaryKeyConstraint("ip", "created_at", "duration"),
        )

    if inspector.has_table("posts") and "ip" not in _posts_columns(inspector):
        # SQLite refuses ADD COLUMN ... NOT NULL without a default, so rebuild there.
        recreate = "always" if bind.dialect.name == "sqlite" else "auto"
        with op.batch_alter_table("posts", recreate=recreate) as batch_op:
            batch_op.add_column(sa.Column("ip", InetAddress, nullable=False))


def downgrade() -> None:
    """Drop the post address column and bans."""
    inspector = sa.inspect(op.get_bind())
    if inspector.has_table("posts") and "ip" in _posts_columns(inspector):
        with op.batch_alter_table("posts") as batch_op:
            batch_op.drop_column("ip")
    if inspector.has_table("bans"):
        op.drop_table("bans")
