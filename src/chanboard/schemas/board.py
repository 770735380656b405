# src/chanboard/schemas/board.py
"""Board-related Pydantic schemas."""

from pydantic import BaseModel, Field

from chanboard.db.types import NAME_LENGTH


class BoardCreate(BaseModel):
    """Schema for creating a new board."""

    name: str = Field(..., min_length=1, max_length=NAME_LENGTH, description="Board identifier")
    title: str = Field(..., min_length=1, description="Display title")
