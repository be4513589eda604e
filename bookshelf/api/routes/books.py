"""Book Routes — HTTP surface of the book catalog.

Invariants:
    - Routes never contain business logic (delegate to BookCatalogService)
    - One service per request, built over the request's DB session
    - Ids are taken as plain path strings; an id that names no book is a 404, never a 400
    - Missing book on GET -> 404 RESOURCE_NOT_FOUND; the service itself returns None
    - Store and domain errors reach the client through the global error handlers
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from bookshelf.core.domain_types import BookId, UserId
from bookshelf.core.errors import ResourceNotFoundError
from bookshelf.infrastructure.book_store import SqlBookStore
from bookshelf.infrastructure.database import get_db
from bookshelf.schemas.book import (
    BookCreate, BookResponse, BookUpdate, BookWithAuthorResponse,
    UserWithBooksResponse,
)
from bookshelf.services.book_catalog import BookCatalogService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/books", tags=["books"])


def get_book_catalog(
    db: AsyncSession = Depends(get_db),
) -> BookCatalogService:
    """FastAPI dependency — catalog service bound to the request session."""
    return BookCatalogService(SqlBookStore(db))


@router.get("", response_model=list[UserWithBooksResponse])
async def list_users_with_books(
    catalog: BookCatalogService = Depends(get_book_catalog),
):
    """List every user with the books they are linked to."""
    users = await catalog.list_users_with_books()
    return [UserWithBooksResponse.model_validate(u) for u in users]


@router.get("/{book_id}", response_model=BookWithAuthorResponse)
async def get_book(
    book_id: str,
    catalog: BookCatalogService = Depends(get_book_catalog),
):
    """Get a book with its author."""
    book = await catalog.get_book_by_id(BookId(book_id))
    if book is None:
        raise ResourceNotFoundError("Book", str(book_id))
    return BookWithAuthorResponse.model_validate(book)


@router.delete("/{book_id}", response_model=BookResponse)
async def delete_book(
    book_id: str,
    catalog: BookCatalogService = Depends(get_book_catalog),
):
    """Delete a book and return what was deleted."""
    book = await catalog.delete_book_by_id(BookId(book_id))
    return BookResponse.model_validate(book)


@router.post(
    "", response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_book(
    body: BookCreate,
    catalog: BookCatalogService = Depends(get_book_catalog),
):
    """Create a book for an existing author."""
    book = await catalog.create_book(body.model_dump())
    return BookResponse.model_validate(book)


@router.put("/{book_id}", response_model=BookResponse)
async def update_book(
    book_id: str,
    body: BookUpdate,
    catalog: BookCatalogService = Depends(get_book_catalog),
):
    """Update the fields sent in the body and re-link the author."""
    book = await catalog.update_book_by_id(
        BookId(book_id), body.model_dump(exclude_unset=True),
    )
    return BookResponse.model_validate(book)


@router.post("/{book_id}/like/{user_id}", response_model=BookResponse)
async def like_book(
    book_id: str,
    user_id: str,
    catalog: BookCatalogService = Depends(get_book_catalog),
):
    """Record that a user likes a book."""
    book = await catalog.like_book(BookId(book_id), UserId(user_id))
    return BookResponse.model_validate(book)
