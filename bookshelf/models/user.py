"""User ORM — the reader side of the like relation.

Invariants:
    - Users are created outside the catalog service
    - books is the join collection (BookLike rows), not Book rows
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from bookshelf.db.base import Base


class User(Base):
    """User entity — likes zero or more books."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    books: Mapped[list["BookLike"]] = relationship(
        "BookLike", back_populates="user",
        cascade="all, delete-orphan",
    )
