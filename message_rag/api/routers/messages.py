"""
Message API endpoints.

Routes:
- POST /conversations/{id}/messages - Create message and index it
- GET /conversations/{id}/messages - Conversation history
- POST /messages/{id}/reindex - Index a message saved without embeddings
- POST /messages/reindex-pending - Backfill messages without embeddings

Dependencies: message_rag.application.services, message_rag.models
System role: Message HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query

from message_rag.api.deps import get_message_service
from message_rag.application.services.message_service import MessageService
from message_rag.core.exceptions import (
    ConversationNotFoundError,
    EmbeddingServiceError,
    MessageNotFoundError,
    PersistenceError,
)
from message_rag.models.message import (
    CreateMessageRequest,
    MessageCreationResult,
    MessageResponse,
    ReindexPendingResponse,
    ReindexResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["messages"])


@router.post(
    "/conversations/{conversation_id}/messages",
    response_model=MessageCreationResult,
    status_code=201,
)
async def create_message(
    conversation_id: UUID,
    request: CreateMessageRequest,
    message_service: MessageService = Depends(get_message_service),
) -> MessageCreationResult:
    """
    Create a message in a conversation.

    Indexing failures do not fail the request: the message is saved and
    indexing_status is "failed".

    Raises:
        HTTPException(404): Conversation not found
        HTTPException(500): Message could not be saved
    """
    try:
        result = await message_service.create_message(
            conversation_id=conversation_id,
            text=request.text,
            user_id=request.user_id,
            is_user_message=request.is_user_message,
        )
        return MessageCreationResult(**result)
    except ConversationNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Message creation failed: {str(e)}"
        )


@router.get(
    "/conversations/{conversation_id}/messages",
    response_model=list[MessageResponse],
)
async def list_messages(
    conversation_id: UUID,
    message_service: MessageService = Depends(get_message_service),
) -> list[MessageResponse]:
    """Get a conversation's messages, oldest first."""
    try:
        messages = await message_service.get_messages(conversation_id)
        return [MessageResponse(**m) for m in messages]
    except ConversationNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to retrieve messages: {str(e)}"
        )


@router.post("/messages/reindex-pending", response_model=ReindexPendingResponse)
async def reindex_pending(
    conversation_id: UUID | None = None,
    limit: int = Query(default=100, ge=1, le=1000),
    message_service: MessageService = Depends(get_message_service),
) -> ReindexPendingResponse:
    """Index up to limit messages that have no embeddings."""
    try:
        counts = await message_service.reindex_pending(
            conversation_id=conversation_id,
            limit=limit,
        )
        return ReindexPendingResponse(**counts)
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Backfill failed: {str(e)}"
        )


@router.post("/messages/{message_id}/reindex", response_model=ReindexResponse)
async def reindex_message(
    message_id: UUID,
    message_service: MessageService = Depends(get_message_service),
) -> ReindexResponse:
    """
    Index a stored message that has no embeddings.

    Raises:
        HTTPException(404): Message not found
        HTTPException(502): Embedding service failed
        HTTPException(500): Embeddings could not be persisted
    """
    try:
        result = await message_service.reindex_message(message_id)
        return ReindexResponse(**result)
    except MessageNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except EmbeddingServiceError as e:
        raise HTTPException(status_code=502, detail=e.message)
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=e.message)
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Reindex failed: {str(e)}"
        )
