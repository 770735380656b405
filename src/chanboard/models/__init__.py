# src/chanboard/models/__init__.py
"""SQLAlchemy models for the chanboard schema."""

from .ban import Ban
from .board import DEFAULT_BOARD_NAME, DEFAULT_BOARD_TITLE, Board
from .post import Post, Reply
from .user import PrivilegeLevel, User, UserSession

__all__ = [
    "Ban",
    "Board", "DEFAULT_BOARD_NAME", "DEFAULT_BOARD_TITLE",
    "Post", "Reply",
    "PrivilegeLevel", "User", "UserSession",
]
