"""Local SQLite mirror of decks and cards."""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from vocabcards.config import settings


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


def _set_sqlite_pragma(dbapi_connection: Any, connection_record: Any) -> None:
    """Enforce foreign keys so deleting a deck removes its cards."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine(url: str | None = None) -> AsyncEngine:
    """
    Create an async engine for ``url`` (defaults to the configured database file).

    NullPool keeps the CLI from holding connections between commands.
    """
    new_engine = create_async_engine(
        url or f"sqlite+aiosqlite:///{settings.db_path}",
        echo=False,
        poolclass=NullPool,
    )
    event.listen(new_engine.sync_engine, "connect", _set_sqlite_pragma)
    return new_engine


engine = create_engine()

async_session = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def init_db() -> None:
    """Create the data directory and any missing tables."""
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session for dependency injection."""
    async with async_session() as session:
        yield session
