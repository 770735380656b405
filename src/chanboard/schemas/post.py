# src/chanboard/schemas/post.py
"""Post-related Pydantic schemas."""

from pydantic import BaseModel, Field, field_validator

from chanboard.db.types import CONTENT_LENGTH, NAME_LENGTH


class PostCreate(BaseModel):
    """Values for a new thread root or reply.

    Empty optional strings are stored as NULL, matching how the submission
    form treats blank fields.
    """

    board: str = Field(..., min_length=1, max_length=NAME_LENGTH)
    title: str | None = Field(None, max_length=NAME_LENGTH)
    author: str | None = Field(None, max_length=NAME_LENGTH)
    email: str | None = Field(None, max_length=NAME_LENGTH)
    sage: bool = False
    plaintext_content: str | None = Field(None, max_length=CONTENT_LENGTH)
    html_content: str = Field(..., max_length=CONTENT_LENGTH)

    @field_validator("title", "author", "email", "plaintext_content", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if isinstance(value, str) and not value:
            return None
        return value
