"""add replies

Revision ID: d17c58a4f0e9
Revises: b3a91e6c7d20
Create Date: 2022-06-06 13:48:35.000000

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "d17c58a4f0e9"
down_revision: Union[str, Sequence[str], None] = "b3a91e6c7d20"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the reply edge table."""
    if sa.inspect(op.get_bind()).has_table("replies"):
        return
    op.create_table(
        "replies",
        sa.Column("message_id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("message_board", sa.String(length=255), nullable=False),
        sa.Column("reply_id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("reply_board", sa.String(length=255), nullable=False),
        sa.Column("reply_thread", sa.Integer(), autoincrement=False, nullable=False),
        sa.ForeignKeyConstraint(["message_board"], ["boards.name"]),
        sa.ForeignKeyConstraint(["reply_board"], ["boards.name"]),
        sa.ForeignKeyConstraint(["message_id", "message_board"], ["posts.id", "posts.board"]),
        sa.ForeignKeyConstraint(["reply_id", "reply_board"], ["posts.id", "posts.board"]),
        sa.ForeignKeyConstraint(["reply_thread", "reply_board"], ["posts.id", "posts.board"]),
        sa.PrimaryKeyConstraint(
            "message_id", "message_board", "reply_id", "reply_board", "reply_thread"
        ),
    )


def downgrade() -> None:
    """Drop the reply edge table."""
    if sa.inspect(op.get_bind()).has_table("replies"):
        op.drop_table("replies")
