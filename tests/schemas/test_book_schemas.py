"""Book schemas — request validation at the API boundary.

Invariants:
    - author_id is required on create and update
    - id and timestamps cannot be supplied by the caller
    - name is stripped; blank names are rejected
    - BookUpdate only reports the fields that were sent
"""

import pytest
from pydantic import ValidationError
from uuid import uuid4

from bookshelf.schemas.book import BookCreate, BookUpdate


# --- BookCreate ---------------------------------------------------------------

def test_book_create_strips_name():
    body = BookCreate(name="  The Hobbit  ", author_id=str(uuid4()))
    assert body.name == "The Hobbit"


def test_book_create_rejects_blank_name():
    with pytest.raises(ValidationError):
        BookCreate(name="   ", author_id=str(uuid4()))


def test_book_create_requires_author_id():
    with pytest.raises(ValidationError):
        BookCreate(name="The Hobbit")


def test_book_create_rejects_timestamps():
    with pytest.raises(ValidationError):
        BookCreate(
            name="The Hobbit", author_id=str(uuid4()),
            created_at="2024-01-01T00:00:00Z",
        )


def test_book_create_dump_carries_author_id():
    author_id = str(uuid4())
    body = BookCreate(name="The Hobbit", author_id=author_id)
    assert body.model_dump() == {
        "name": "The Hobbit", "description": None, "author_id": author_id,
    }


# --- BookUpdate ---------------------------------------------------------------

def test_book_update_dump_only_sent_fields():
    author_id = str(uuid4())
    body = BookUpdate(description="Revised", author_id=author_id)
    assert body.model_dump(exclude_unset=True) == {
        "description": "Revised", "author_id": author_id,
    }


def test_book_update_requires_author_id():
    with pytest.raises(ValidationError):
        BookUpdate(name="The Hobbit")


def test_book_update_rejects_explicit_null_name():
    with pytest.raises(ValidationError):
        BookUpdate(name=None, author_id=str(uuid4()))


def test_book_update_rejects_id():
    with pytest.raises(ValidationError):
        BookUpdate(id=uuid4(), author_id=str(uuid4()))
