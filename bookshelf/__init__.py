"""Bookshelf — book catalog API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
