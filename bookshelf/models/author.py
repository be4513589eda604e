"""Author ORM — the owner side of the book relation.

Invariants:
    - name is unique and non-nullable
    - Authors are created outside the catalog service
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from bookshelf.db.base import Base


class Author(Base):
    """Author entity — writes zero or more books."""
    __tablename__ = "authors"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    books: Mapped[list["Book"]] = relationship(
        "Book", back_populates="author",
    )
