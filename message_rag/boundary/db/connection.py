"""
Async database connection management.

One pooled asyncpg engine per process, a session factory bound to it and the
FastAPI dependency that yields a request-scoped session.

Dependencies: sqlalchemy, asyncpg, message_rag.configs
System role: Database connection lifecycle management
"""

from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from message_rag.configs import get_settings


@lru_cache
def get_async_engine() -> AsyncEngine:
    """
    Build the process-wide async engine.

    Pool sizing comes from POSTGRES_* settings; pool_pre_ping drops
    connections the server has closed.

    Usage:
        async with get_async_engine().connect() as conn:
            await conn.execute(text("SELECT 1"))
    """
    db_config = get_settings().database

    return create_async_engine(
        db_config.async_database_url,
        echo=db_config.echo_sql,
        pool_size=db_config.pool_size,
        max_overflow=db_config.max_overflow,
        pool_timeout=db_config.pool_timeout,
        pool_pre_ping=True,
    )


@lru_cache
def get_async_session_factory() -> async_sessionmaker[AsyncSession]:
    """
    Session factory bound to the shared engine.

    expire_on_commit=False keeps generated IDs and timestamps readable after
    a service commits; autoflush is off so writes happen at explicit flushes.
    """
    return async_sessionmaker(
        bind=get_async_engine(),
        autoflush=False,
        expire_on_commit=False,
    )


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency yielding one session per request.

    The session is closed when the response is done; uncommitted work is
    rolled back on close.

    Usage:
        @router.get("/conversations/{id}")
        async def read(id: UUID, db: AsyncSession = Depends(get_async_db)): ...
    """
    session_factory = get_async_session_factory()
    async with session_factory() as session:
        yield session
