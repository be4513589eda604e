"""Structured logging — JSON formatter surfaces catalog extras."""

import json
import logging
from uuid import uuid4

from bookshelf.infrastructure.observability import JSONFormatter


def _record(**extra):
    record = logging.LogRecord(
        "bookshelf.test", logging.INFO, __file__, 1, "Book created", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_base_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "bookshelf.test"
    assert payload["message"] == "Book created"
    assert "timestamp" in payload


def test_json_formatter_stringifies_ids():
    book_id = uuid4()
    payload = json.loads(JSONFormatter().format(_record(book_id=book_id)))
    assert payload["book_id"] == str(book_id)


def test_json_formatter_skips_missing_extras():
    payload = json.loads(JSONFormatter().format(_record()))
    assert "user_id" not in payload
    assert "store_code" not in payload
