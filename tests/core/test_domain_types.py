"""Domain Types — identity NewTypes pass raw identifiers through unchanged."""

from bookshelf.core.domain_types import AuthorId, BookId, UserId


def test_identity_types_wrap_raw_identifiers():
    assert BookId("nonexistent-id") == "nonexistent-id"
    assert AuthorId("a-1") == "a-1"
    assert UserId("u-1") == "u-1"
