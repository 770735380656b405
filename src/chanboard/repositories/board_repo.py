"""Data access helpers for boards."""
from __future__ import annotations

import logging

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from chanboard.core.errors import BoardNotFoundError
from chanboard.models.board import DEFAULT_BOARD_NAME, DEFAULT_BOARD_TITLE, Board
from chanboard.schemas.board import BoardCreate

__all__ = ["BoardRepository"]

logger = logging.getLogger(__name__)


class BoardRepository:
    """Thin wrapper around database access for boards.

    Methods flush but never commit; the caller owns the transaction.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_all(self) -> list[Board]:
        """Return every board ordered by name."""
        return list(self.session.scalars(select(Board).order_by(Board.name)))

    def get(self, name: str) -> Board | None:
        return self.session.get(Board, name)

    def create(self, data: BoardCreate) -> Board:
        """Insert a board; a duplicate name fails with IntegrityError on flush."""
        board = Board(name=data.name, title=data.title, next_post_id=0)
        self.session.add(board)
        self.session.flush()
        logger.info("Created board /%s/ (%s)", board.name, board.title)
        return board

    def ensure_default(self) -> Board:
        """Return the default board, inserting it if missing."""
        board = self.get(DEFAULT_BOARD_NAME)
        if board is None:
            board = self.create(BoardCreate(name=DEFAULT_BOARD_NAME, title=DEFAULT_BOARD_TITLE))
        return board

    def allocate_post_id(self, name: str) -> int:
        """Advance the board's counter and return the new post id.

        Runs as a single ``UPDATE ... RETURNING`` so concurrent writers on the
        same board serialize on the row lock and never share an id. The id is
        only consumed if the caller's transaction commits.
        """
        stmt = (
            update(Board)
            .where(Board.name == name)
            .values(next_post_id=Board.next_post_id + 1)
            .returning(Board.next_post_id)
        )
        post_id = self.session.execute(stmt).scalar_one_or_none()
        if post_id is None:
            raise BoardNotFoundError(name)
        logger.debug("Allocated post id %d on /%s/", post_id, name)
        return post_id
