"""Pydantic schemas validating values before they are written."""

from .ban import BanCreate
from .board import BoardCreate
from .post import PostCreate

__all__ = ["BanCreate", "BoardCreate", "PostCreate"]
