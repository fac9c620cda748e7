"""
Generated content schemas.

Dependencies: pydantic, message_rag.core.ingestion
System role: Generated content API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

from message_rag.core.ingestion.models import IndexingStatus


class CreateContentRequest(BaseModel):
    """Request schema for storing generated content."""

    user_id: uuid.UUID
    content: str = Field(min_length=1, description="Generated text to index")
    title: str | None = Field(default=None, max_length=255)
    prompt: str | None = None
    conversation_id: uuid.UUID | None = None


class ContentResponse(BaseModel):
    """Stored generated content."""

    id: uuid.UUID
    title: str | None
    prompt: str | None
    content: str
    conversation_id: uuid.UUID | None
    user_id: uuid.UUID
    created_at: datetime
    updated_at: datetime


class ContentCreationResult(BaseModel):
    """Content creation outcome including indexing status."""

    content: ContentResponse
    embedding_count: int
    indexing_status: IndexingStatus
