"""Unit tests for price_oracle/infrastructure/database.py.

Tests cover Settings defaults, env var overrides, and object types.
No database connection is required.
"""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from price_oracle.infrastructure.database import AsyncSessionLocal, Base, Settings, engine, settings


def test_settings_default_url_uses_asyncpg(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    assert "postgresql+asyncpg" in Settings().database_url


def test_settings_reads_database_url_from_env(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@myhost/mydb")
    assert Settings().database_url == "postgresql+asyncpg://u:p@myhost/mydb"


def test_base_is_declarative_base():
    assert issubclass(Base, DeclarativeBase)


def test_engine_is_async():
    assert isinstance(engine, AsyncEngine)


def test_session_factory_produces_async_sessions():
    assert isinstance(AsyncSessionLocal, async_sessionmaker)
    assert AsyncSessionLocal.class_ is AsyncSession


def test_every_table_is_registered():
    import price_oracle.infrastructure.persistence  # noqa: F401

    assert {"oracle_state", "registered_assets", "price_entries"} <= set(Base.metadata.tables)


def test_settings_sql_echo_defaults_off(monkeypatch):
    monkeypatch.delenv("SQL_ECHO", raising=False)
    assert Settings().sql_echo is False


def test_settings_reads_sql_echo_from_env(monkeypatch):
    monkeypatch.setenv("SQL_ECHO", "true")
    assert Settings().sql_echo is True


def test_engine_echo_follows_settings():
    assert engine.sync_engine.echo == settings.sql_echo
