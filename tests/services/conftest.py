"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe sees the test engine
    - Authors and users are seeded directly (the catalog never creates them)

Design Decisions:
    - SQLite in-memory with StaticPool: every session shares one connection,
      so rows written through the API are visible to the test session
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from bookshelf.db.base import Base
from bookshelf.infrastructure.database import get_db, DatabaseSessionManager
from bookshelf.infrastructure.book_store import SqlBookStore
from bookshelf.models import Author, Book, User
from bookshelf.services.book_catalog import BookCatalogService
import bookshelf.infrastructure.database as db_module
from bookshelf.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def catalog(test_db):
    """Catalog service over the SQL store on the test session."""
    return BookCatalogService(SqlBookStore(test_db))


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_author(test_db):
    author = Author(name="Tolkien")
    test_db.add(author)
    await test_db.commit()
    await test_db.refresh(author)
    return author


@pytest.fixture
async def other_author(test_db):
    author = Author(name="Le Guin")
    test_db.add(author)
    await test_db.commit()
    await test_db.refresh(author)
    return author


@pytest.fixture
async def seed_user(test_db):
    user = User(name="Ada")
    test_db.add(user)
    await test_db.commit()
    await test_db.refresh(user)
    return user


@pytest.fixture
async def seed_book(test_db, seed_author):
    book = Book(
        name="The Hobbit", description="There and back again",
        author_id=seed_author.id,
    )
    test_db.add(book)
    await test_db.commit()
    await test_db.refresh(book)
    return book
