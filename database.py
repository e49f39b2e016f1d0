"""
Database connection and session management for Word Scramble Bot.
The database only holds the dictionary lookup cache.
"""
import logging

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from config import SETTINGS, LOGGER_NAME_DB
from models.db_models import Base

logger = logging.getLogger(LOGGER_NAME_DB)

# Create async engine
engine = create_async_engine(
    SETTINGS.database_url,
    echo=SETTINGS.dev_mode,  # Log SQL queries in dev mode
    pool_pre_ping=True,  # Enable connection health checks
)

# Create session factory
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def init_database() -> None:
    """Initialize the database by creating all tables."""
    logger.info("Initializing database...")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database initialized successfully.")


async def close_database() -> None:
    """Close database connections."""
    logger.info("Closing database connections...")
    await engine.dispose()
    logger.info("Database connections closed.")
