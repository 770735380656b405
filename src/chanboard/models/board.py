# src/chanboard/models/board.py
"""SQLAlchemy model for boards."""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from chanboard.db.session import Base
from chanboard.db.types import NAME_LENGTH

# Seeded by the initial migration.
DEFAULT_BOARD_NAME = "b"
DEFAULT_BOARD_TITLE = "Random"


class Board(Base):
    """A named forum partition containing threads."""

    __tablename__ = "boards"

    name: Mapped[str] = mapped_column(String(NAME_LENGTH), primary_key=True, unique=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    # Last id handed out on this board; advanced atomically on every post.
    next_post_id: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default="0"
    )

    def __repr__(self) -> str:
        return f"Board(name={self.name!r}, title={self.title!r})"
