"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Authors and users are pre-existing rows; books and likes are written by the catalog

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from bookshelf.models.author import Author  # noqa: F401
from bookshelf.models.book import Book  # noqa: F401
from bookshelf.models.user import User  # noqa: F401
from bookshelf.models.book_like import BookLike  # noqa: F401
