"""Settings — environment-driven configuration."""

from bookshelf.config import Settings


def test_postgres_url_rewritten_for_asyncpg():
    settings = Settings(database_url="postgresql://u:p@host:5432/db")
    assert settings.database_url == "postgresql+asyncpg://u:p@host:5432/db"


def test_other_urls_left_alone():
    settings = Settings(database_url="sqlite+aiosqlite:///:memory:")
    assert settings.database_url == "sqlite+aiosqlite:///:memory:"


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("DATABASE_POOL_SIZE", "5")
    settings = Settings()
    assert settings.log_level == "DEBUG"
    assert settings.database_pool_size == 5
