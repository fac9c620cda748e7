"""
Database table creation script.

Enables the pgvector extension and creates all tables defined in ORM models
using SQLAlchemy metadata. Bootstrap helper only; schema changes are managed
outside this service.

Dependencies: sqlalchemy, asyncpg, message_rag.configs
System role: Database schema initialization

Usage:
    python -m message_rag.boundary.db.create_tables
"""

import asyncio
import logging

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from message_rag.boundary.db.base import Base
from message_rag.boundary.db.connection import get_async_engine
from message_rag.observability.logger import configure_logging

# Import all models to register them with Base.metadata
from message_rag.boundary.db.models import (  # noqa: F401
    ConversationModel,
    EmbeddingModel,
    GeneratedContentModel,
    MessageModel,
)

logger = logging.getLogger(__name__)


async def create_all_tables(engine: AsyncEngine | None = None) -> None:
    """
    Create the vector extension and all database tables.

    Idempotent: uses CREATE EXTENSION IF NOT EXISTS and create_all, so safe
    to run multiple times. Existing tables remain unchanged.

    Args:
        engine: Engine to use (defaults to the configured async engine)

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
        (e.g., pgvector not installed, permissions denied)
    """
    engine = engine or get_async_engine()

    async with engine.begin() as conn:
        await conn.execute(text("CREATE EXTENSION IF NOT EXISTS vector"))
        await conn.run_sync(Base.metadata.create_all)

    logger.info("All tables created successfully")


async def drop_all_tables(engine: AsyncEngine | None = None) -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.

    Args:
        engine: Engine to use (defaults to the configured async engine)
    """
    engine = engine or get_async_engine()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    logger.info("All tables dropped successfully")


if __name__ == "__main__":
    configure_logging()
    asyncio.run(create_all_tables())
