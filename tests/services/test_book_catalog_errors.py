"""Error translation — create_book maps store codes, everything else passes through.

Tests cover:
    - P2002 -> ConflictError, P2025 -> BadRequestError on create
    - Any other StoreError on create is re-raised as the same object
    - Non-store exceptions are never caught
    - Update and like never translate
"""

import pytest
from unittest.mock import AsyncMock
from uuid import uuid4

from bookshelf.core.errors import (
    BadRequestError, ConflictError, StoreError, StoreErrorCode,
)
from bookshelf.services.book_catalog import BookCatalogService


def _make_store(**methods):
    store = AsyncMock()
    for name, side_effect in methods.items():
        getattr(store, name).side_effect = side_effect
    return store


async def test_create_splits_author_id_from_fields():
    store = _make_store()
    author_id = uuid4()
    service = BookCatalogService(store)

    await service.create_book({"name": "Dune", "author_id": author_id})

    store.create_book.assert_awaited_once_with({"name": "Dune"}, author_id)


async def test_create_does_not_mutate_caller_payload():
    service = BookCatalogService(_make_store())
    payload = {"name": "Dune", "author_id": uuid4()}

    await service.create_book(payload)

    assert "author_id" in payload


@pytest.mark.parametrize(
    "store_code, expected_type, expected_message",
    [
        (StoreErrorCode.UNIQUE_CONSTRAINT, ConflictError, "Name is already taken"),
        (StoreErrorCode.RECORD_NOT_FOUND, BadRequestError, "Product doesn't exist"),
    ],
)
async def test_create_translates_known_store_codes(
    store_code, expected_type, expected_message,
):
    original = StoreError(store_code, "store says no")
    service = BookCatalogService(_make_store(create_book=original))

    with pytest.raises(expected_type) as exc_info:
        await service.create_book({"name": "Dune", "author_id": uuid4()})

    assert exc_info.value.message == expected_message
    assert exc_info.value.__cause__ is original


@pytest.mark.parametrize(
    "store_code", [StoreErrorCode.FOREIGN_KEY, StoreErrorCode.UNKNOWN],
)
async def test_create_propagates_other_store_errors_unchanged(store_code):
    original = StoreError(store_code, "store says no")
    service = BookCatalogService(_make_store(create_book=original))

    with pytest.raises(StoreError) as exc_info:
        await service.create_book({"name": "Dune", "author_id": uuid4()})

    assert exc_info.value is original


async def test_create_does_not_catch_non_store_errors():
    service = BookCatalogService(_make_store(create_book=RuntimeError("boom")))

    with pytest.raises(RuntimeError, match="boom"):
        await service.create_book({"name": "Dune", "author_id": uuid4()})


async def test_update_propagates_unique_violation_unchanged():
    original = StoreError(StoreErrorCode.UNIQUE_CONSTRAINT, "dup")
    service = BookCatalogService(_make_store(update_book=original))

    with pytest.raises(StoreError) as exc_info:
        await service.update_book_by_id(uuid4(), {"author_id": uuid4()})

    assert exc_info.value is original


async def test_update_passes_partial_fields_and_author():
    store = _make_store()
    book_id, author_id = uuid4(), uuid4()
    service = BookCatalogService(store)

    await service.update_book_by_id(
        book_id, {"description": "New", "author_id": author_id},
    )

    store.update_book.assert_awaited_once_with(
        book_id, {"description": "New"}, author_id,
    )


async def test_like_propagates_store_errors_unchanged():
    original = StoreError(StoreErrorCode.RECORD_NOT_FOUND, "missing")
    service = BookCatalogService(_make_store(add_like=original))

    with pytest.raises(StoreError) as exc_info:
        await service.like_book(uuid4(), uuid4())

    assert exc_info.value is original


async def test_get_book_by_id_passes_through_none():
    service = BookCatalogService(_make_store(find_book=[None]))
    assert await service.get_book_by_id(uuid4()) is None
