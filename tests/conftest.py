"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory async database, fake embedding clients, seeded rows
Dependencies: pytest, sqlalchemy, aiosqlite, langchain_core
System role: Test infrastructure and fixture management
"""

import uuid
from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.embeddings import DeterministicFakeEmbedding

from message_rag.configs.embedding import EMBEDDING_DIMENSIONS


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Foreign keys are switched on per connection so ON DELETE CASCADE and
    FK violations behave as they do on PostgreSQL.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    from sqlalchemy import event
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool
    from message_rag.boundary.db.base import Base
    from message_rag.boundary.db import models  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def fake_embeddings() -> DeterministicFakeEmbedding:
    """Offline embedding client returning stable 1536-dimension vectors per text."""
    return DeterministicFakeEmbedding(size=EMBEDDING_DIMENSIONS)


@pytest.fixture
def generator(fake_embeddings):
    """EmbeddingGenerator wired to the fake embedding client."""
    from message_rag.core.ingestion.embedding_generator import EmbeddingGenerator

    return EmbeddingGenerator(embeddings=fake_embeddings, timeout_seconds=5.0)


@pytest.fixture
def mock_embeddings() -> MagicMock:
    """Embedding client whose async calls can be scripted per test."""
    client = MagicMock()
    client.aembed_documents = AsyncMock()
    client.aembed_query = AsyncMock()
    return client


@pytest.fixture
def user_id() -> uuid.UUID:
    """Provide sample user ID."""
    return uuid.uuid4()


@pytest.fixture
async def conversation(test_async_db, user_id):
    """Committed conversation row."""
    from message_rag.boundary.db.CRUD.conversation_crud import conversation_crud

    record = await conversation_crud.create(test_async_db, user_id=user_id, title="Study notes")
    await test_async_db.commit()
    return record


@pytest.fixture
async def message(test_async_db, conversation, user_id):
    """Committed message row without embeddings."""
    from message_rag.boundary.db.CRUD.message_crud import message_crud

    record = await message_crud.create(
        test_async_db,
        conversation_id=conversation.id,
        text="Hello world. This is great.",
        user_id=user_id,
    )
    await test_async_db.commit()
    return record


@pytest.fixture
def unit_vector():
    """Factory for vectors with a single 1.0 at the given axis."""

    def _make(axis: int, size: int = EMBEDDING_DIMENSIONS) -> list[float]:
        vector = [0.0] * size
        vector[axis] = 1.0
        return vector

    return _make
