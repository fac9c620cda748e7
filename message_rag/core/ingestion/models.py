"""
Ingestion domain models.

Fragments, embedded fragments, embedding owners and search matches used by
the chunker, the embedding generator and the retrieval layer.

Dependencies: pydantic
System role: Data structures for the RAG ingestion pipeline
"""

import enum
import uuid
from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class IndexingStatus(str, enum.Enum):
    """
    Outcome of indexing a stored record.

    INDEXED: Embeddings persisted
    SKIPPED: Text produced no fragments, nothing to embed
    FAILED: Embedding or persistence failed; the record has no embeddings
    """

    INDEXED = "indexed"
    SKIPPED = "skipped"
    FAILED = "failed"


class Fragment(BaseModel):
    """Trimmed, non-empty piece of a source text."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0, description="Position within the source text")
    content: str = Field(min_length=1, description="Fragment text")


class EmbeddedFragment(Fragment):
    """Fragment paired with the vector the embedding model returned for it."""

    embedding: list[float] = Field(description="Embedding vector")


class MessageOwner(BaseModel):
    """Embedding owner: a conversation message."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["message"] = "message"
    message_id: uuid.UUID

    @property
    def owner_id(self) -> uuid.UUID:
        return self.message_id

    def as_columns(self) -> dict[str, uuid.UUID | None]:
        """Foreign key values for an embeddings row."""
        return {"message_id": self.message_id, "content_id": None}


class GeneratedContentOwner(BaseModel):
    """Embedding owner: a generated content record."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["content"] = "content"
    content_id: uuid.UUID

    @property
    def owner_id(self) -> uuid.UUID:
        return self.content_id

    def as_columns(self) -> dict[str, uuid.UUID | None]:
        """Foreign key values for an embeddings row."""
        return {"message_id": None, "content_id": self.content_id}


EmbeddingOwner = Annotated[
    Union[MessageOwner, GeneratedContentOwner],
    Field(discriminator="kind"),
]


class IngestionResult(BaseModel):
    """Outcome of a successful ingestion call."""

    owner: EmbeddingOwner
    fragment_count: int = Field(ge=0)
    embedding_ids: list[uuid.UUID] = Field(
        default_factory=list,
        description="Persisted embedding IDs, in fragment order",
    )

    @property
    def persisted(self) -> bool:
        return bool(self.embedding_ids)


class SimilarityMatch(BaseModel):
    """One nearest-neighbour hit from the vector store."""

    embedding_id: uuid.UUID
    content: str
    distance: float = Field(description="Cosine distance (0 = identical direction)")
    similarity: float = Field(description="Cosine similarity, 1 - distance")
    message_id: uuid.UUID | None = None
    content_id: uuid.UUID | None = None
    created_at: datetime
