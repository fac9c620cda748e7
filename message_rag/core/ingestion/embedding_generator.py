"""
Embedding generation and persistence for ingested text.

Chunks text, embeds every fragment in one batched call to the hosted model,
pairs vectors with fragments by position and writes them as a single
all-or-nothing batch of embedding rows.

Dependencies: langchain_core, sqlalchemy, message_rag.boundary.db
System role: Second and third stages of the ingestion pipeline
"""

import asyncio
import logging
from typing import Sequence

from langchain_core.embeddings import Embeddings
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from message_rag.boundary.db.CRUD.embedding_crud import embedding_crud
from message_rag.configs.embedding import EMBEDDING_DIMENSIONS
from message_rag.core.exceptions import EmbeddingServiceError, PersistenceError
from message_rag.core.ingestion.chunking import SentenceSplitter, chunk_fragments
from message_rag.core.ingestion.models import (
    EmbeddedFragment,
    EmbeddingOwner,
    IngestionResult,
)
from message_rag.observability.log_utils import log_exception_with_context, log_with_context

logger = logging.getLogger(__name__)


class EmbeddingGenerator:
    """
    Turn text into persisted embedding rows for one owner.

    Holds only immutable configuration and the injected client, so one
    instance can serve concurrent ingestions for different owners.
    No retries are performed; every failure propagates to the caller.
    """

    def __init__(
        self,
        embeddings: Embeddings,
        splitter: SentenceSplitter | None = None,
        model: str = "text-embedding-ada-002",
        dimensions: int = EMBEDDING_DIMENSIONS,
        timeout_seconds: float = 30.0,
    ) -> None:
        """
        Initialize generator with an embedding client.

        Args:
            embeddings: LangChain embeddings client for the hosted model
            splitter: Sentence splitting strategy (period splitting if None)
            model: Model identifier, used for diagnostics only
            dimensions: Expected vector length
            timeout_seconds: Deadline for the batched embedding request

        Raises:
            ValueError: When dimensions or timeout_seconds is not positive
        """
        if dimensions < 1:
            raise ValueError("dimensions must be positive")
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")

        self._embeddings = embeddings
        self._splitter = splitter
        self.model = model
        self.dimensions = dimensions
        self.timeout_seconds = timeout_seconds

    async def generate(
        self,
        text: str,
        owner_id: str | None = None,
        timeout_seconds: float | None = None,
    ) -> list[EmbeddedFragment]:
        """
        Chunk text and embed every fragment.

        Args:
            text: Raw text to ingest
            owner_id: Owning message/content ID for diagnostics
            timeout_seconds: Deadline for this call (generator default if None)

        Returns:
            list[EmbeddedFragment]: One entry per fragment, in fragment order;
            empty when the text has no fragments (the service is not called)

        Raises:
            EmbeddingServiceError: When the call fails, times out or returns
            vectors of the wrong count or dimension
        """
        fragments = chunk_fragments(text, self._splitter)
        if not fragments:
            return []

        timeout = self._resolve_timeout(timeout_seconds)
        contents = [fragment.content for fragment in fragments]
        vectors = await self._embed(contents, owner_id, timeout)

        return [
            EmbeddedFragment(index=fragment.index, content=fragment.content, embedding=vector)
            for fragment, vector in zip(fragments, vectors)
        ]

    async def ingest(
        self,
        db: AsyncSession,
        text: str,
        owner: EmbeddingOwner,
        timeout_seconds: float | None = None,
    ) -> IngestionResult:
        """
        Generate embeddings for text and persist them for owner.

        Embedding completes before any write. The batch is committed as a
        unit; on failure the session is rolled back so no row of this batch
        remains.

        Args:
            db: Async database session
            text: Raw text to ingest
            owner: Message or generated content owning the rows
            timeout_seconds: Deadline for the embedding request (generator default if None)

        Returns:
            IngestionResult: Fragment count and persisted IDs (empty for blank text)

        Raises:
            EmbeddingServiceError: When embedding generation fails
            PersistenceError: When the batched insert fails
        """
        owner_id = str(owner.owner_id)
        embedded = await self.generate(text, owner_id=owner_id, timeout_seconds=timeout_seconds)

        if not embedded:
            log_with_context(
                logger, logging.INFO, "No fragments to ingest",
                owner_id=owner_id, owner_kind=owner.kind,
            )
            return IngestionResult(owner=owner, fragment_count=0)

        try:
            records = await embedding_crud.create_many(db, owner, embedded)
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            log_exception_with_context(
                logger, "Embedding batch insert failed", e,
                owner_id=owner_id, record_count=len(embedded),
            )
            raise PersistenceError(
                f"Failed to persist embeddings: {e}",
                owner_id=owner_id,
                record_count=len(embedded),
            ) from e

        log_with_context(
            logger, logging.INFO, "Embeddings persisted",
            owner_id=owner_id, owner_kind=owner.kind, record_count=len(records),
        )
        return IngestionResult(
            owner=owner,
            fragment_count=len(embedded),
            embedding_ids=[record.id for record in records],
        )

    async def embed_query(self, query: str, timeout_seconds: float | None = None) -> list[float]:
        """
        Embed a single search query under the same timeout and shape checks.

        Raises:
            EmbeddingServiceError: When the call fails, times out or the
            vector has the wrong dimension
        """
        timeout = self._resolve_timeout(timeout_seconds)
        try:
            vector = await asyncio.wait_for(
                self._embeddings.aembed_query(query),
                timeout=timeout,
            )
        except asyncio.TimeoutError as e:
            raise EmbeddingServiceError(
                f"Query embedding timed out after {timeout}s",
                fragments=[query],
                model=self.model,
            ) from e
        except Exception as e:
            raise EmbeddingServiceError(
                f"Query embedding failed: {e}",
                fragments=[query],
                model=self.model,
            ) from e

        self._check_dimensions([vector], [query], None)
        return list(vector)

    def _resolve_timeout(self, timeout_seconds: float | None) -> float:
        if timeout_seconds is None:
            return self.timeout_seconds
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")
        return timeout_seconds

    async def _embed(
        self,
        contents: list[str],
        owner_id: str | None,
        timeout: float,
    ) -> list[list[float]]:
        """Submit all fragments as one batched request and validate the response."""
        try:
            vectors = await asyncio.wait_for(
                self._embeddings.aembed_documents(contents),
                timeout=timeout,
            )
        except asyncio.TimeoutError as e:
            raise EmbeddingServiceError(
                f"Embedding request timed out after {timeout}s",
                fragments=contents,
                owner_id=owner_id,
                model=self.model,
            ) from e
        except Exception as e:
            log_exception_with_context(
                logger, "Embedding request failed", e,
                owner_id=owner_id, fragment_count=len(contents),
            )
            raise EmbeddingServiceError(
                f"Embedding request failed: {e}",
                fragments=contents,
                owner_id=owner_id,
                model=self.model,
            ) from e

        if len(vectors) != len(contents):
            raise EmbeddingServiceError(
                f"Embedding service returned {len(vectors)} vectors for {len(contents)} fragments",
                fragments=contents,
                owner_id=owner_id,
                model=self.model,
            )
        self._check_dimensions(vectors, contents, owner_id)
        return [list(vector) for vector in vectors]

    def _check_dimensions(
        self,
        vectors: Sequence[Sequence[float]],
        contents: list[str],
        owner_id: str | None,
    ) -> None:
        for index, vector in enumerate(vectors):
            if len(vector) != self.dimensions:
                raise EmbeddingServiceError(
                    f"Vector {index} has dimension {len(vector)}, expected {self.dimensions}",
                    fragments=contents,
                    owner_id=owner_id,
                    model=self.model,
                )
