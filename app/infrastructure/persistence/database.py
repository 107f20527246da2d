"""Persistence: async engine, session factory, and Base for SQLAlchemy ORM.

Schema is managed by Alembic migrations (app/infrastructure/persistence/migrations).

Engine and session factory are created lazily on first use (get_db /
get_db_transactional / get_session_factory) so import does not trigger
Settings validation.
"""

import logging
from typing import Any

from sqlalchemy import event
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.core.config import get_settings
from app.domain.exceptions import FiretrackException, InfrastructureException

logger = logging.getLogger(__name__)

# Set by _ensure_engine() on first use; avoids get_settings() at import time.
engine: AsyncEngine | None = None
AsyncSessionLocal: async_sessionmaker[AsyncSession] | None = None


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy declarative models."""


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _record: Any) -> None:
    """SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str, echo: bool = False, **pool_kwargs: Any) -> AsyncEngine:
    """Create an async engine; Postgres gets a pool, SQLite gets foreign keys enabled."""
    if database_url.startswith("sqlite"):
        created = create_async_engine(database_url, echo=echo)
        event.listen(created.sync_engine, "connect", _enable_sqlite_foreign_keys)
        return created
    return create_async_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
        pool_recycle=3600,
        **pool_kwargs,
    )


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory shared by request dependencies, scripts and tests."""
    return async_sessionmaker(
        bind=bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )


def _ensure_engine() -> None:
    """Create engine and AsyncSessionLocal on first use."""
    global engine, AsyncSessionLocal
    if AsyncSessionLocal is not None:
        return
    settings = get_settings()
    pool_kwargs: dict[str, Any] = {}
    if not settings.database_url.startswith("sqlite"):
        pool_kwargs["pool_size"] = (
            settings.db_pool_size if settings.db_pool_size is not None else 10
        )
        pool_kwargs["max_overflow"] = (
            settings.db_max_overflow if settings.db_max_overflow is not None else 20
        )
    engine = build_engine(settings.database_url, settings.database_echo, **pool_kwargs)
    AsyncSessionLocal = build_session_factory(engine)


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Return the process-wide session factory (creating the engine if needed)."""
    _ensure_engine()
    assert AsyncSessionLocal is not None
    return AsyncSessionLocal


async def dispose_engine() -> None:
    """Dispose the engine (lifespan shutdown)."""
    global engine, AsyncSessionLocal
    if engine is not None:
        await engine.dispose()
        logger.info("Database engine disposed")
    engine = None
    AsyncSessionLocal = None


async def get_db():
    """Database session dependency for read operations.

    Does not commit; use get_db_transactional for writes.
    Yields a session and closes it on exit.
    """
    async with get_session_factory()() as session:
        yield session


async def get_db_transactional():
    """Database session dependency for write operations.

    Commits on success and rolls back on exception, except for domain
    exceptions with keep_changes set (a counted wrong activation attempt
    must persist even though the request fails). Connection failures
    surface as InfrastructureException (503).
    """
    try:
        async with get_session_factory()() as session:
            try:
                yield session
            except FiretrackException as e:
                if e.keep_changes:
                    await session.commit()
                else:
                    await session.rollback()
                raise
            except BaseException:
                await session.rollback()
                raise
            else:
                await session.commit()
    except OperationalError as e:
        logger.error("Database unavailable: %s", e)
        raise InfrastructureException("The database is unavailable.") from e
