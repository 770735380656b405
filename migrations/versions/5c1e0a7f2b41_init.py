"""init: boards and posts

Revision ID: 5c1e0a7f2b41
Revises:
Create Date: 2022-05-14 22:42:21.000000

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "5c1e0a7f2b41"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

DEFAULT_BOARD = {"name": "b", "title": "Random"}


def upgrade() -> None:
    """Create boards and posts and seed the default board."""
    bind = op.get_bind()
    inspector = sa.inspect(bind)

    if not inspector.has_table("boards"):
        op.create_table(
            "boards",
            sa.Column("name", sa.String(length=255), nullable=False),
            sa.Column("title", sa.Text(), nullable=False),
            sa.Column("next_post_id", sa.Integer(), nullable=False, server_default="0"),
            sa.PrimaryKeyConstraint("name"),
            sa.UniqueConstraint("name"),
        )

    boards = sa.table(
        "boards",
        sa.column("name", sa.String(length=255)),
        sa.column("title", sa.Text()),
    )
    seeded = bind.execute(
        sa.select(boards.c.name).where(boards.c.name == DEFAULT_BOARD["name"])
    ).first()
    if seeded is None:
        op.bulk_insert(boards, [DEFAULT_BOARD])

    if not inspector.has_table("posts"):
        op.create_table(
            "posts",
            sa.Column("id", sa.Integer(), autoincrement=False, nullable=False),
            sa.Column("board", sa.String(length=255), nullable=False),
            sa.Column("title", sa.String(length=255), nullable=True),
            sa.Column("author", sa.String(length=255), nullable=True),
            sa.Column("email", sa.String(length=255), nullable=True),
            sa.Column("sage", sa.Boolean(), nullable=False),
            sa.Column("plaintext_content", sa.String(length=65535), nullable=True),
            sa.Column("html_content", sa.String(length=65535), nullable=False),
            sa.Column("thread", sa.Integer(), nullable=False),
            sa.Column(
                "posted_at",
                sa.DateTime(),
                nullable=False,
                server_default=sa.func.now(),
            ),
            sa.PrimaryKeyConstraint("id", "board"),
            sa.ForeignKeyConstraint(["board"], ["boards.name"]),
            sa.ForeignKeyConstraint(["thread", "board"], ["posts.id", "posts.board"]),
        )


def downgrade() -> None:
    """Drop posts and boards."""
    inspector = sa.inspect(op.get_bind())
    if inspector.has_table("posts"):
        op.drop_table("posts")
    if inspector.has_table("boards"):
        op.drop_table("boards")
