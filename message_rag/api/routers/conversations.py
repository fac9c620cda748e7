"""
Conversation API endpoints.

Routes:
- POST /conversations - Create conversation
- GET /conversations?user_id= - List a user's conversations
- GET /conversations/{id} - Get conversation
- DELETE /conversations/{id} - Delete conversation with its messages and embeddings

Dependencies: message_rag.application.services, message_rag.models
System role: Conversation management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from message_rag.api.deps import get_conversation_service
from message_rag.application.services.conversation_service import ConversationService
from message_rag.core.exceptions import ConversationNotFoundError, ValidationError
from message_rag.models.conversation import ConversationResponse, CreateConversationRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/conversations", tags=["conversations"])


@router.post("", response_model=ConversationResponse, status_code=201)
async def create_conversation(
    request: CreateConversationRequest,
    conversation_service: ConversationService = Depends(get_conversation_service),
) -> ConversationResponse:
    """
    Create a new conversation.

    Raises:
        HTTPException(400): Invalid title
        HTTPException(500): Creation failed
    """
    try:
        conversation = await conversation_service.create_conversation(
            user_id=request.user_id,
            title=request.title,
        )
        return ConversationResponse(**conversation)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Conversation creation failed: {str(e)}"
        )


@router.get("", response_model=list[ConversationResponse])
async def list_conversations(
    user_id: UUID,
    limit: int = 100,
    offset: int = 0,
    conversation_service: ConversationService = Depends(get_conversation_service),
) -> list[ConversationResponse]:
    """
    List a user's conversations, newest first.

    Args:
        user_id: Owning user ID
        limit: Maximum number of conversations (default 100)
        offset: Number to skip (default 0)
        conversation_service: Injected ConversationService
    """
    try:
        conversations = await conversation_service.get_conversations(
            user_id=user_id,
            limit=limit,
            offset=offset,
        )
        return [ConversationResponse(**c) for c in conversations]
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to retrieve conversations: {str(e)}"
        )


@router.get("/{conversation_id}", response_model=ConversationResponse)
async def get_conversation(
    conversation_id: UUID,
    conversation_service: ConversationService = Depends(get_conversation_service),
) -> ConversationResponse:
    """Get a conversation by ID."""
    try:
        conversation = await conversation_service.get_conversation(conversation_id)
        return ConversationResponse(**conversation)
    except ConversationNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to retrieve conversation: {str(e)}"
        )


@router.delete("/{conversation_id}", status_code=204)
async def delete_conversation(
    conversation_id: UUID,
    conversation_service: ConversationService = Depends(get_conversation_service),
) -> None:
    """
    Delete a conversation by ID.

    Returns:
        204 No Content on success

    Raises:
        HTTPException(404): Conversation not found
        HTTPException(500): Deletion failed
    """
    try:
        await conversation_service.delete_conversation(conversation_id)
    except ConversationNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Conversation deletion failed: {str(e)}"
        )
