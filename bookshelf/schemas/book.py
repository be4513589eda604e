"""Book Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - BookCreate/BookUpdate never accept id or timestamps (extra fields are rejected)
    - author_id is required on both create and update; it is passed to the store unparsed
    - name is stripped and non-empty when supplied
    - Response models read straight from ORM rows (from_attributes)
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _strip_name(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("name cannot be empty or whitespace")
    return v


class BookCreate(BaseModel):
    """Book creation — name, optional description, existing author."""
    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1, max_length=255)
    description: str | None = Field(None, max_length=10_000)
    author_id: str = Field(max_length=64)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return _strip_name(v)


class BookUpdate(BaseModel):
    """Book update — only the fields sent are applied; author is always re-linked."""
    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, max_length=10_000)
    author_id: str = Field(max_length=64)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str | None) -> str:
        # only runs when name was sent; omitted names keep the stored value
        if v is None:
            raise ValueError("name cannot be null")
        return _strip_name(v)


# --- Responses ---------------------------------------------------------------

class AuthorResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str


class BookResponse(BaseModel):
    """Book row as stored."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    description: str | None = None
    author_id: UUID
    created_at: datetime
    updated_at: datetime


class BookWithAuthorResponse(BookResponse):
    """Book row with its author expanded."""
    author: AuthorResponse


class BookLikeResponse(BaseModel):
    """Join row with the liked book expanded."""
    model_config = ConfigDict(from_attributes=True)

    user_id: UUID
    book_id: UUID
    created_at: datetime
    book: BookResponse


class UserWithBooksResponse(BaseModel):
    """User with the join rows of every book they liked."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    books: list[BookLikeResponse]
