"""Book ORM — the catalog's writable entity.

Invariants:
    - id is UUID primary key
    - name is unique; a duplicate insert raises IntegrityError
    - author_id is non-nullable: a book cannot exist without its author
    - created_at/updated_at are assigned here, never by the caller

Design Decisions:
    - author loaded with selectin: get-by-id always returns the author expanded
    - likes cascade with the book (ORM cascade + ON DELETE CASCADE on the FK)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from bookshelf.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Book(Base):
    """Book entity — belongs to one author, liked by many users."""
    __tablename__ = "books"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    author_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("authors.id", ondelete="CASCADE"),
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=_utcnow, onupdate=_utcnow,
    )

    # Relationships
    author: Mapped["Author"] = relationship(
        "Author", back_populates="books", lazy="selectin",
    )
    users: Mapped[list["BookLike"]] = relationship(
        "BookLike", back_populates="book",
        cascade="all, delete-orphan", lazy="selectin",
    )
