# src/chanboard/models/post.py
"""SQLAlchemy models for posts and the reply edges between them."""

from datetime import datetime

from sqlalchemy import (
    Boolean,
    DateTime,
    ForeignKey,
    ForeignKeyConstraint,
    Integer,
    PrimaryKeyConstraint,
    String,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from chanboard.db.session import Base
from chanboard.db.time import utcnow
from chanboard.db.types import CONTENT_LENGTH, NAME_LENGTH, InetAddress


class Post(Base):
    """A message on a board, keyed by its per-board id.

    Every post belongs to exactly one thread: a thread root points at itself,
    replies point at their root. ``thread`` is always scoped to ``board``.
    """

    __tablename__ = "posts"
    __table_args__ = (
        PrimaryKeyConstraint("id", "board"),
        ForeignKeyConstraint(["thread", "board"], ["posts.id", "posts.board"]),
    )

    id: Mapped[int] = mapped_column(Integer, autoincrement=False)
    board: Mapped[str] = mapped_column(String(NAME_LENGTH), ForeignKey("boards.name"))
    title: Mapped[str | None] = mapped_column(String(NAME_LENGTH), nullable=True)
    author: Mapped[str | None] = mapped_column(String(NAME_LENGTH), nullable=True)
    email: Mapped[str | None] = mapped_column(String(NAME_LENGTH), nullable=True)
    # Sage replies do not bump their thread.
    sage: Mapped[bool] = mapped_column(Boolean, nullable=False)
    plaintext_content: Mapped[str | None] = mapped_column(String(CONTENT_LENGTH), nullable=True)
    html_content: Mapped[str] = mapped_column(String(CONTENT_LENGTH), nullable=False)
    thread: Mapped[int] = mapped_column(Integer, nullable=False)
    posted_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utcnow, server_default=func.now()
    )
    ip: Mapped[str] = mapped_column(InetAddress, nullable=False)

    @property
    def is_thread_root(self) -> bool:
        return self.thread == self.id

    def __repr__(self) -> str:
        return f"Post(board={self.board!r}, id={self.id}, thread={self.thread})"


class Reply(Base):
    """Directed edge: post ``reply_*`` quotes post ``message_*``.

    ``reply_thread`` is the thread of the replying post; it is part of the key
    so listings can link straight into the right thread.
    """

    __tablename__ = "replies"
    __table_args__ = (
        PrimaryKeyConstraint(
            "message_id", "message_board", "reply_id", "reply_board", "reply_thread"
        ),
        ForeignKeyConstraint(["message_id", "message_board"], ["posts.id", "posts.board"]),
        ForeignKeyConstraint(["reply_id", "reply_board"], ["posts.id", "posts.board"]),
        ForeignKeyConstraint(["reply_thread", "reply_board"], ["posts.id", "posts.board"]),
    )

    message_id: Mapped[int] = mapped_column(Integer, autoincrement=False)
    message_board: Mapped[str] = mapped_column(String(NAME_LENGTH), ForeignKey("boards.name"))
    reply_id: Mapped[int] = mapped_column(Integer, autoincrement=False)
    reply_board: Mapped[str] = mapped_column(String(NAME_LENGTH), ForeignKey("boards.name"))
    reply_thread: Mapped[int] = mapped_column(Integer, autoincrement=False)
