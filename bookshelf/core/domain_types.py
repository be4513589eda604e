"""Domain Types — identity types that replace bare strings across the codebase.

Invariants:
    - BookId, AuthorId, UserId are the caller's raw identifiers
    - Only the store parses them; an identifier that does not parse names no row
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

BookId = NewType("BookId", str)
AuthorId = NewType("AuthorId", str)
UserId = NewType("UserId", str)
