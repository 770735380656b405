"""Exceptions raised by the data-access layer."""

from __future__ import annotations


class ChanboardError(RuntimeError):
    """Base class for domain errors."""


class BoardNotFoundError(ChanboardError):
    """Raised when a board name does not resolve to a row."""

    def __init__(self, board: str) -> None:
        super().__init__(f"board {board!r} does not exist")
        self.board = board


class ThreadNotFoundError(ChanboardError):
    """Raised when a thread has no posts or its root is missing."""

    def __init__(self, board: str, thread: int) -> None:
        super().__init__(f"thread {board}/{thread} not found")
        self.board = board
        self.thread = thread


class ThreadMismatchError(ChanboardError):
    """Raised when a reply edge names a thread the replying post is not in."""
