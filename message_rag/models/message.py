"""
Message schemas.

Request/response schemas for message creation, history and reindexing.

Dependencies: pydantic, message_rag.core.ingestion
System role: Message API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

from message_rag.core.ingestion.models import IndexingStatus


class CreateMessageRequest(BaseModel):
    """Request schema for posting a message to a conversation."""

    text: str = Field(description="Message text")
    user_id: uuid.UUID
    is_user_message: bool = Field(default=True, description="False for assistant responses")


class MessageResponse(BaseModel):
    """Stored message."""

    id: uuid.UUID
    text: str
    is_user_message: bool
    conversation_id: uuid.UUID
    user_id: uuid.UUID
    created_at: datetime


class MessageCreationResult(BaseModel):
    """Message creation outcome including indexing status."""

    message: MessageResponse
    embedding_count: int
    indexing_status: IndexingStatus
    status_message: str


class ReindexResponse(BaseModel):
    """Outcome of indexing a stored message."""

    message_id: uuid.UUID
    embedding_count: int
    indexing_status: IndexingStatus


class ReindexPendingResponse(BaseModel):
    """Counts per indexing outcome for a backfill run."""

    indexed: int = 0
    skipped: int = 0
    failed: int = 0
