"""
Database session management.
"""
# chatcrm/db/session.py
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional, Type, TypeVar

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from chatcrm.core.config import settings
from chatcrm.db.base import Base

logger = logging.getLogger("chatcrm.db")

engine_options = {
    "echo": settings.DEBUG,
    "pool_pre_ping": True,
}

# SQLite uses its own pool classes which reject sizing arguments
if not settings.DATABASE_URL.startswith("sqlite"):
    engine_options.update(
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_recycle=settings.DB_POOL_RECYCLE,
    )

# Create async engine
engine = create_async_engine(settings.DATABASE_URL, **engine_options)

# Create async session factory
async_session_factory = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


# Context manager for database sessions
@asynccontextmanager
async def get_session(
    session_factory: Optional[sessionmaker] = None,
) -> AsyncGenerator[AsyncSession, None]:
    """
    Context manager for database sessions.

    Automatically handles commit/rollback and ensures session is closed.

    Usage:
        async with get_session() as session:
            # Use session here
    """
    session = (session_factory or async_session_factory)()
    try:
        yield session
        await session.commit()
        logger.debug("Database session committed")
    except Exception as e:
        await session.rollback()
        logger.error(f"Database session rolled back due to: {str(e)}")
        raise
    finally:
        await session.close()
        logger.debug("Database session closed")


# Create a type variable for repository types
T = TypeVar('T')


# Context manager for repositories
@asynccontextmanager
async def get_repository_context(
    repo_type: Type[T],
    session_factory: Optional[sessionmaker] = None,
) -> AsyncGenerator[T, None]:
    """
    Get a repository with managed session lifecycle.

    Usage:
        async with get_repository_context(UserRepository) as repo:
            # Use repo here
    """
    async with get_session(session_factory) as session:
        yield repo_type(session)


async def initialize_database(session_factory: Optional[sessionmaker] = None) -> None:
    """
    Check that the database is reachable.

    Raises whatever the driver raises when the connection fails.
    """
    logger.info("Initializing database connection pool")

    async with get_session(session_factory) as session:
        try:
            await session.execute(text("SELECT 1"))
            logger.info("Database connection successful")
        except Exception as e:
            logger.error(f"Database connection failed: {e}")
            raise

    logger.info("Database initialization complete")


async def create_tables(db_engine: Optional[AsyncEngine] = None) -> None:
    """Create all tables registered on the model metadata."""
    async with (db_engine or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created")


async def drop_tables(db_engine: Optional[AsyncEngine] = None) -> None:
    """Drop all tables registered on the model metadata."""
    async with (db_engine or engine).begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.info("Database tables dropped")


async def close_database_connections(db_engine: Optional[AsyncEngine] = None) -> None:
    """
    Close all database connections in the pool.

    This should be called before the process exits.
    """
    logger.info("Closing database connections")

    # Dispose the engine to close all connections in the pool
    await (db_engine or engine).dispose()

    logger.info("Database connections closed")
