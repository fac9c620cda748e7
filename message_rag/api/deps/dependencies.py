"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: message_rag.configs, message_rag.application, message_rag.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends
from langchain_core.embeddings import Embeddings
from sqlalchemy.ext.asyncio import AsyncSession

from message_rag.application.services import (
    ContentService,
    ConversationService,
    MessageService,
    RetrievalService,
)
from message_rag.boundary.db import get_async_db
from message_rag.boundary.embeddings import build_embedding_client
from message_rag.configs import Settings, get_settings
from message_rag.core.ingestion.embedding_generator import EmbeddingGenerator


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self):
        self._embedding_client = None
        self._generator = None

    @property
    def embedding_client(self) -> Embeddings:
        """Get cached hosted embedding client."""
        if self._embedding_client is None:
            self._embedding_client = build_embedding_client(get_settings().embedding)
        return self._embedding_client

    @property
    def generator(self) -> EmbeddingGenerator:
        """Get cached embedding generator."""
        if self._generator is None:
            config = get_settings().embedding
            self._generator = EmbeddingGenerator(
                embeddings=self.embedding_client,
                model=config.model,
                dimensions=config.dimensions,
                timeout_seconds=config.timeout_seconds,
            )
        return self._generator

    def clear(self) -> None:
        """Clear all cached instances."""
        self._embedding_client = None
        self._generator = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_embedding_generator() -> EmbeddingGenerator:
    """Get the shared embedding generator."""
    return get_service_cache().generator


def get_conversation_service(
    db: AsyncSession = Depends(get_async_db),
) -> ConversationService:
    """
    Get conversation service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        ConversationService: Conversation service instance
    """
    return ConversationService(db=db)


def get_message_service(
    db: AsyncSession = Depends(get_async_db),
    generator: EmbeddingGenerator = Depends(get_embedding_generator),
) -> MessageService:
    """
    Get message service instance.

    Args:
        db: Async database session (injected via Depends)
        generator: Shared embedding generator (injected via Depends)

    Returns:
        MessageService: Message service with ingestion wired in
    """
    return MessageService(db=db, generator=generator)


def get_content_service(
    db: AsyncSession = Depends(get_async_db),
    generator: EmbeddingGenerator = Depends(get_embedding_generator),
) -> ContentService:
    """Get generated content service instance."""
    return ContentService(db=db, generator=generator)


def get_retrieval_service(
    db: AsyncSession = Depends(get_async_db),
    generator: EmbeddingGenerator = Depends(get_embedding_generator),
    settings: Settings = Depends(get_settings_dependency),
) -> RetrievalService:
    """
    Get retrieval service instance.

    Returns:
        RetrievalService: Search service using the configured default top-k
    """
    return RetrievalService(db=db, generator=generator, default_k=settings.embedding.top_k)
