"""Boundary Protocols — contracts between the catalog service and the store.

Invariants:
    - The service NEVER imports the SQLAlchemy store — dependency arrows point inward only
    - Every method is one store round-trip and commits its own unit of work
    - Failures surface as StoreError (core/errors.py) carrying a StoreErrorCode
    - Ids are passed as the caller sent them; an id the store cannot parse names no row

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass any fake store
"""

from typing import Any, Protocol, Sequence

from bookshelf.core.domain_types import AuthorId, BookId, UserId


class BookStore(Protocol):
    """Contract for book persistence — implemented by infrastructure/book_store.py."""
    async def find_users_with_books(self) -> Sequence[Any]: ...
    async def find_book(self, book_id: BookId) -> Any | None: ...
    async def delete_book(self, book_id: BookId) -> Any: ...
    async def create_book(
        self, fields: dict[str, Any], author_id: AuthorId,
    ) -> Any: ...
    async def update_book(
        self, book_id: BookId, fields: dict[str, Any], author_id: AuthorId,
    ) -> Any: ...
    async def add_like(self, book_id: BookId, user_id: UserId) -> Any: ...
