"""Data access helpers for the chanboard schema."""

from .ban_repo import BanRepository
from .board_repo import BoardRepository
from .post_repo import PostRepository
from .user_repo import SessionRepository, UserRepository

__all__ = [
    "BanRepository",
    "BoardRepository",
    "PostRepository",
    "SessionRepository",
    "UserRepository",
]
