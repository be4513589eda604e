"""Book Catalog Service — the six catalog operations over an injected BookStore.

Invariants:
    - One store call per operation; no retries, no compensation
    - Only create_book translates store failures:
        P2002 (unique)             -> ConflictError("Name is already taken")
        P2025 (related not found)  -> BadRequestError("Product doesn't exist")
      anything else is re-raised as the same exception object
    - get_book_by_id returns None for a missing book instead of raising
    - list_users_with_books queries users and expands their liked books
"""

import logging
from typing import Any, Sequence

from bookshelf.core.domain_types import AuthorId, BookId, UserId
from bookshelf.core.errors import (
    BadRequestError, ConflictError, ErrorContext, StoreError, StoreErrorCode,
)
from bookshelf.core.repository_protocols import BookStore

logger = logging.getLogger(__name__)


class BookCatalogService:
    """Catalog operations — thin translation layer over the relational store."""

    def __init__(self, store: BookStore):
        self.store = store

    async def list_users_with_books(self) -> Sequence[Any]:
        return await self.store.find_users_with_books()

    async def get_book_by_id(self, book_id: BookId) -> Any | None:
        return await self.store.find_book(book_id)

    async def delete_book_by_id(self, book_id: BookId) -> Any:
        return await self.store.delete_book(book_id)

    async def create_book(self, book_data: dict[str, Any]) -> Any:
        """Create a book connected to an existing author.

        book_data holds the writable book fields plus author_id.
        """
        fields = dict(book_data)
        author_id: AuthorId = fields.pop("author_id")
        try:
            return await self.store.create_book(fields, author_id)
        except StoreError as e:
            context = ErrorContext(author_id=str(author_id))
            logger.info(
                f"Book create rejected by store: {e.message}",
                extra={"store_code": e.store_code.value, "author_id": author_id},
            )
            if e.store_code == StoreErrorCode.UNIQUE_CONSTRAINT:
                raise ConflictError("Name is already taken", context) from e
            if e.store_code == StoreErrorCode.RECORD_NOT_FOUND:
                raise BadRequestError("Product doesn't exist", context) from e
            raise

    async def update_book_by_id(
        self, book_id: BookId, book_data: dict[str, Any],
    ) -> Any:
        """Apply the supplied fields and re-link the author. Store errors propagate."""
        fields = dict(book_data)
        author_id: AuthorId = fields.pop("author_id")
        return await self.store.update_book(book_id, fields, author_id)

    async def like_book(self, book_id: BookId, user_id: UserId) -> Any:
        return await self.store.add_like(book_id, user_id)
