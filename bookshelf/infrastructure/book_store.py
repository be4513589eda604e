"""SQL Book Store — SQLAlchemy implementation of the BookStore protocol.

Invariants:
    - Every write commits its own unit of work; a failed commit is rolled back before raising
    - Connecting to a missing author or user raises StoreError(RECORD_NOT_FOUND)
    - Touching a missing book (delete, update, like) raises StoreError(RECORD_NOT_FOUND)
    - IntegrityError is classified by SQLSTATE, with a message fallback for SQLite
    - An identifier that is not a UUID names no row: lookups return None, writes raise P2025

Design Decisions:
    - Relations are connected through ORM relationships, so returned rows carry
      the related objects without an extra query
"""

import logging
from typing import Any, Sequence, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from bookshelf.core.domain_types import AuthorId, BookId, UserId
from bookshelf.core.errors import ErrorContext, StoreError, StoreErrorCode
from bookshelf.db.base import Base
from bookshelf.models.author import Author
from bookshelf.models.book import Book
from bookshelf.models.book_like import BookLike
from bookshelf.models.user import User

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

_SQLSTATE_CODES = {
    "23505": StoreErrorCode.UNIQUE_CONSTRAINT,
    "23503": StoreErrorCode.FOREIGN_KEY,
}

_SQLITE_MESSAGES = {
    "UNIQUE constraint failed": StoreErrorCode.UNIQUE_CONSTRAINT,
    "FOREIGN KEY constraint failed": StoreErrorCode.FOREIGN_KEY,
}

_COMMIT_FAILURE_MESSAGES = {
    StoreErrorCode.UNIQUE_CONSTRAINT: "Unique constraint failed",
    StoreErrorCode.FOREIGN_KEY: "Foreign key constraint failed",
    StoreErrorCode.UNKNOWN: "Integrity constraint failed",
}


def parse_identifier(raw: str | UUID) -> UUID | None:
    """Parse a caller identifier; None when it cannot name a row."""
    if isinstance(raw, UUID):
        return raw
    try:
        return UUID(str(raw))
    except ValueError:
        return None


def classify_integrity_error(exc: IntegrityError) -> StoreErrorCode:
    """Map a driver integrity failure to a store error code."""
    orig = exc.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate in _SQLSTATE_CODES:
        return _SQLSTATE_CODES[sqlstate]
    message = str(orig)
    for fragment, code in _SQLITE_MESSAGES.items():
        if fragment in message:
            return code
    return StoreErrorCode.UNKNOWN


class SqlBookStore:
    """Book persistence over one request-scoped AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_users_with_books(self) -> Sequence[User]:
        result = await self.db.execute(
            select(User).options(
                selectinload(User.books).selectinload(BookLike.book),
            ),
        )
        return result.scalars().all()

    async def find_book(self, book_id: BookId) -> Book | None:
        parsed = parse_identifier(book_id)
        if parsed is None:
            return None
        result = await self.db.execute(
            select(Book).where(Book.id == parsed),
        )
        return result.scalar_one_or_none()

    async def delete_book(self, book_id: BookId) -> Book:
        book = await self._book_or_raise(book_id, "delete")
        await self.db.delete(book)
        await self._commit(ErrorContext(book_id=str(book_id)))
        logger.info("Book deleted", extra={"book_id": book_id})
        return book

    async def create_book(
        self, fields: dict[str, Any], author_id: AuthorId,
    ) -> Book:
        author = await self._connect(Author, author_id, "Book")
        book = Book(**fields, author=author)
        self.db.add(book)
        await self._commit(ErrorContext(author_id=str(author_id)))
        logger.info(
            "Book created", extra={"book_id": book.id, "author_id": author_id},
        )
        return book

    async def update_book(
        self, book_id: BookId, fields: dict[str, Any], author_id: AuthorId,
    ) -> Book:
        book = await self._book_or_raise(book_id, "update")
        author = await self._connect(Author, author_id, "Book")
        for name, value in fields.items():
            setattr(book, name, value)
        book.author = author
        await self._commit(
            ErrorContext(book_id=str(book_id), author_id=str(author_id)),
        )
        return book

    async def add_like(self, book_id: BookId, user_id: UserId) -> Book:
        book = await self._book_or_raise(book_id, "update")
        user = await self._connect(User, user_id, "BookLike")
        book.users.append(BookLike(user=user))
        await self._commit(
            ErrorContext(book_id=str(book_id), user_id=str(user_id)),
        )
        logger.info(
            "Book liked", extra={"book_id": book_id, "user_id": user_id},
        )
        return book

    async def _book_or_raise(self, book_id: BookId, operation: str) -> Book:
        book = await self.find_book(book_id)
        if book is None:
            raise StoreError(
                StoreErrorCode.RECORD_NOT_FOUND,
                f"Record to {operation} does not exist",
                ErrorContext(book_id=str(book_id)),
            )
        return book

    async def _connect(
        self, model: type[ModelT], related_id: str | UUID, owner: str,
    ) -> ModelT:
        parsed = parse_identifier(related_id)
        related = await self.db.get(model, parsed) if parsed is not None else None
        if related is None:
            raise StoreError(
                StoreErrorCode.RECORD_NOT_FOUND,
                f"No '{model.__name__}' record was found for a nested connect on '{owner}'",
            )
        return related

    async def _commit(self, context: ErrorContext) -> None:
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            code = classify_integrity_error(e)
            logger.warning(
                f"Store rejected write: {e.orig}",
                extra={"store_code": code.value},
            )
            raise StoreError(code, _COMMIT_FAILURE_MESSAGES[code], context) from e
