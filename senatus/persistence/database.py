"""Database connection and session management.

Provides async database engine and session factory for PostgreSQL.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire
from sqlalchemy.exc import DBAPIError, InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from senatus.config import Settings
from senatus.domain.error import StorageUnavailableError


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False,  # Manual flushing for better control
    )


async def _discard_transaction(session: AsyncSession, operation: str) -> None:
    try:
        await session.rollback()
    except Exception as e:
        # The connection may already be gone; the caller raises the triggering error
        logfire.warn(
            "Rollback after storage failure failed", operation=operation, error=str(e)
        )


@asynccontextmanager
async def storage_errors(session: AsyncSession, operation: str) -> AsyncIterator[None]:
    """Translate transient driver failures into StorageUnavailableError.

    The session's transaction is rolled back first so the caller can retry
    on the same session. Integrity and programming errors pass through
    unchanged.

    Args:
        session: Session the guarded statements run on
        operation: Name of the repository operation, for the error message

    Raises:
        StorageUnavailableError: On connection loss, timeouts or operational errors
    """
    try:
        yield
    except (OperationalError, InterfaceError) as e:
        logfire.warn("Storage unavailable", operation=operation, error=str(e))
        await _discard_transaction(session, operation)
        raise StorageUnavailableError(operation, str(e.orig)) from e
    except DBAPIError as e:
        if not e.connection_invalidated:
            raise
        logfire.warn("Storage connection invalidated", operation=operation)
        await _discard_transaction(session, operation)
        raise StorageUnavailableError(operation, "connection invalidated") from e
    except (ConnectionError, TimeoutError) as e:
        logfire.warn("Storage unreachable", operation=operation, error=str(e))
        await _discard_transaction(session, operation)
        raise StorageUnavailableError(operation, str(e)) from e
