# app/adapters/outbound/persistence/database.py (async version)

import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.exc import SQLAlchemyError

from app.adapters.configuration.config import settings
from app.adapters.outbound.persistence.models.base_model import Base

# Configure logger
logger = logging.getLogger(__name__)

# Build async database URL trocando o driver síncrono por asyncpg
database_url = str(settings.DATABASE_URL).replace(
    f"postgresql+{settings.DB_DRIVER}", "postgresql+asyncpg"
)
logger.info(f"Connecting to database: {database_url.split('@')[-1]}")

try:
    # Create async engine
    engine = create_async_engine(
        database_url,
        echo=False,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_recycle=settings.DB_POOL_RECYCLE,
        pool_pre_ping=True
    )

    # Create async session factory
    AsyncSessionLocal = async_sessionmaker(
        autoflush=False,
        bind=engine,
        expire_on_commit=False,
    )

    logger.info("Async database connection configured successfully")

except SQLAlchemyError as e:
    logger.error(f"Error connecting to database: {str(e)}")
    raise


@asynccontextmanager
async def get_db_context() -> AsyncGenerator[AsyncSession, None]:
    """
    Provides an async context for database operations,
    ensuring the session is closed on every exit path.

    Writes are committed explicitly by the repository; anything left
    pending when an error escapes is rolled back.

    Yields:
        AsyncSession: SQLAlchemy async session

    Example:
        ```python
        async with get_db_context() as db:
            clientes = await client_repository.list_ordered_by_nome(db)
        ```
    """
    session = AsyncSessionLocal()
    try:
        yield session
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency injection for use with FastAPI.

    Yields:
        AsyncSession: SQLAlchemy async session
    """
    async with get_db_context() as session:
        yield session


async def create_tables() -> None:
    """Create the tables that do not exist yet."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


__all__ = ["Base", "engine", "AsyncSessionLocal", "get_db_context", "get_db", "create_tables"]
