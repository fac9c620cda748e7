"""
Similarity search schemas.

Dependencies: pydantic, message_rag.core.ingestion
System role: Retrieval API contracts
"""

import uuid

from pydantic import BaseModel, Field, model_validator

from message_rag.core.ingestion.models import SimilarityMatch


class SearchRequest(BaseModel):
    """Search by query text or by a precomputed query embedding."""

    query: str | None = Field(default=None, description="Query text to embed")
    embedding: list[float] | None = Field(default=None, description="Query vector")
    k: int | None = Field(default=None, ge=1, le=100, description="Number of matches")
    conversation_id: uuid.UUID | None = Field(
        default=None,
        description="Restrict matches to one conversation",
    )

    @model_validator(mode="after")
    def check_query_or_embedding(self) -> "SearchRequest":
        if (self.query is None) == (self.embedding is None):
            raise ValueError("Provide exactly one of 'query' or 'embedding'")
        return self


class SearchResponse(BaseModel):
    """Nearest fragments, closest first."""

    matches: list[SimilarityMatch]
    total: int
