"""
Retrieval service orchestrator.

Nearest-neighbour search over stored fragment embeddings, by query vector
or by query text embedded with the hosted model.

Dependencies: message_rag.boundary.db.CRUD, message_rag.core.ingestion
System role: RAG retrieval use case orchestration
"""

import logging
from typing import Sequence
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from message_rag.boundary.db.CRUD.embedding_crud import embedding_crud
from message_rag.core.exceptions import RetrievalError, ValidationError
from message_rag.core.ingestion.embedding_generator import EmbeddingGenerator
from message_rag.core.ingestion.models import SimilarityMatch

logger = logging.getLogger(__name__)

MAX_K = 100


class RetrievalService:
    """Read-only similarity search over the vector store."""

    def __init__(
        self,
        db: AsyncSession,
        generator: EmbeddingGenerator,
        default_k: int = 5,
    ) -> None:
        """
        Initialize retrieval service.

        Args:
            db: Async SQLAlchemy session
            generator: Generator whose client and dimensions are used for queries
            default_k: Number of matches when the caller does not specify k
        """
        self.db = db
        self.generator = generator
        self.default_k = default_k

    async def search_by_vector(
        self,
        query_vector: Sequence[float],
        k: int | None = None,
        conversation_id: UUID | None = None,
    ) -> list[SimilarityMatch]:
        """
        Return the k nearest fragments to query_vector.

        Args:
            query_vector: Query embedding of the configured dimension
            k: Number of matches (1-100, defaults to default_k)
            conversation_id: Optional conversation scope

        Returns:
            list[SimilarityMatch]: Ascending cosine distance, newest first on ties

        Raises:
            ValidationError: If the vector dimension or k is invalid
            RetrievalError: If the database query fails
        """
        k = self.default_k if k is None else k
        if not 1 <= k <= MAX_K:
            raise ValidationError(f"k must be between 1 and {MAX_K}", field="k")
        if len(query_vector) != self.generator.dimensions:
            raise ValidationError(
                f"Query vector has dimension {len(query_vector)}, "
                f"expected {self.generator.dimensions}",
                field="embedding",
            )

        try:
            rows = await embedding_crud.search_nearest(
                self.db,
                query_vector,
                k,
                conversation_id=conversation_id,
            )
        except SQLAlchemyError as e:
            logger.error(f"{__name__}:search_by_vector - query failed: {e}")
            raise RetrievalError(
                f"Similarity search failed: {e}",
                conversation_id=str(conversation_id) if conversation_id else None,
            ) from e

        return [
            SimilarityMatch(
                embedding_id=record.id,
                content=record.content,
                distance=distance,
                similarity=1.0 - distance,
                message_id=record.message_id,
                content_id=record.content_id,
                created_at=record.created_at,
            )
            for record, distance in rows
        ]

    async def search_by_text(
        self,
        query: str,
        k: int | None = None,
        conversation_id: UUID | None = None,
    ) -> list[SimilarityMatch]:
        """
        Embed query text and return its nearest fragments.

        Blank queries return no matches without calling the model.

        Raises:
            EmbeddingServiceError: When query embedding fails
            ValidationError: If k is invalid
            RetrievalError: If the database query fails
        """
        if not query or not query.strip():
            return []

        query_vector = await self.generator.embed_query(query.strip())
        return await self.search_by_vector(query_vector, k=k, conversation_id=conversation_id)
