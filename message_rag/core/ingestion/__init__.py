"""
Ingestion pipeline: chunking, embedding generation and domain models.

EmbeddingGenerator lives in message_rag.core.ingestion.embedding_generator and
is imported from there, since it depends on the database boundary.
"""

from message_rag.core.ingestion.chunking import (
    PeriodSentenceSplitter,
    SentenceSplitter,
    chunk_fragments,
    chunk_text,
)
from message_rag.core.ingestion.models import (
    EmbeddedFragment,
    EmbeddingOwner,
    Fragment,
    GeneratedContentOwner,
    IndexingStatus,
    IngestionResult,
    MessageOwner,
    SimilarityMatch,
)

__all__ = [
    "PeriodSentenceSplitter",
    "SentenceSplitter",
    "chunk_fragments",
    "chunk_text",
    "EmbeddedFragment",
    "EmbeddingOwner",
    "Fragment",
    "GeneratedContentOwner",
    "IndexingStatus",
    "IngestionResult",
    "MessageOwner",
    "SimilarityMatch",
]
