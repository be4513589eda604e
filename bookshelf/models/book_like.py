"""BookLike ORM — join rows linking a user to a book they liked.

Invariants:
    - (user_id, book_id) is unique: a second like for the same pair fails the insert
    - Rows are deleted with either side (ON DELETE CASCADE)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from bookshelf.db.base import Base


class BookLike(Base):
    """Join entity between User and Book."""
    __tablename__ = "book_likes"
    __table_args__ = (
        UniqueConstraint("user_id", "book_id", name="uq_book_likes_user_book"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    book_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("books.id", ondelete="CASCADE"),
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="books")
    book: Mapped["Book"] = relationship("Book", back_populates="users")
