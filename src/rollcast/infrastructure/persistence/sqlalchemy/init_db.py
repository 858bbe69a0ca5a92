"""Database initialization utilities."""

import asyncio
import logging
import sys

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from rollcast.infrastructure.persistence.sqlalchemy.models import Base
from rollcast_config.settings import get_settings

logger = logging.getLogger(__name__)


def _get_engine() -> AsyncEngine:
    """Get the database engine for initialization."""
    settings = get_settings()
    return create_async_engine(
        settings.database_url,
        echo=settings.database_echo,
        pool_pre_ping=True,
    )


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    logger.info("Ensuring all database tables exist...")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema is up to date (missing tables created if needed)")


async def drop_tables(engine: AsyncEngine) -> None:
    """
    Drop all database tables (USE WITH CAUTION!).

    This is primarily for testing and development reset scenarios.
    """
    logger.warning("Dropping all database tables...")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.info("Database tables dropped successfully")


async def _init_database() -> None:
    engine = _get_engine()
    try:
        await create_tables(engine)
    finally:
        await engine.dispose()


async def _reset_database() -> None:
    engine = _get_engine()
    try:
        await drop_tables(engine)
        await create_tables(engine)
    finally:
        await engine.dispose()


def db_init() -> None:
    """Initialize database (create tables)."""
    logging.basicConfig(level=logging.INFO)
    asyncio.run(_init_database())


def db_reset() -> None:
    """Drop and recreate all database tables.

    Requires ``--force`` since every stored session is lost.
    """
    logging.basicConfig(level=logging.INFO)
    if "--force" not in sys.argv and "-f" not in sys.argv:
        logger.error("Refusing to drop all data without --force")
        sys.exit(1)
    asyncio.run(_reset_database())
