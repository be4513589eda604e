"""Infrastructure Layer — database access, the SQL book store, and logging.

Invariants:
    - Infrastructure implements core/ protocols; core never imports from here
    - All SQLAlchemy failures leave this layer as StoreError or DatabaseError
"""
