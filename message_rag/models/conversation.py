"""
Conversation schemas.

Dependencies: pydantic
System role: Conversation API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class CreateConversationRequest(BaseModel):
    """Request schema for creating a conversation."""

    user_id: uuid.UUID
    title: str = Field(min_length=1, max_length=500, description="Conversation title")


class ConversationResponse(BaseModel):
    """Response schema for conversation operations."""

    id: uuid.UUID
    title: str
    user_id: uuid.UUID
    created_at: datetime
    updated_at: datetime
