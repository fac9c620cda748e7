"""
Generated content API endpoints.

Routes:
- POST /contents - Store generated content and index it
- GET /contents?user_id= - List a user's generated content

Dependencies: message_rag.application.services, message_rag.models
System role: Generated content HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from message_rag.api.deps import get_content_service
from message_rag.application.services.content_service import ContentService
from message_rag.core.exceptions import ConversationNotFoundError, ValidationError
from message_rag.models.content import (
    ContentCreationResult,
    ContentResponse,
    CreateContentRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/contents", tags=["contents"])


@router.post("", response_model=ContentCreationResult, status_code=201)
async def create_content(
    request: CreateContentRequest,
    content_service: ContentService = Depends(get_content_service),
) -> ContentCreationResult:
    """
    Store generated content and index it as system knowledge.

    Raises:
        HTTPException(400): Blank content
        HTTPException(404): Referenced conversation not found
        HTTPException(500): Content could not be saved
    """
    try:
        result = await content_service.create_content(
            user_id=request.user_id,
            content=request.content,
            title=request.title,
            prompt=request.prompt,
            conversation_id=request.conversation_id,
        )
        return ContentCreationResult(**result)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except ConversationNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Content creation failed: {str(e)}"
        )


@router.get("", response_model=list[ContentResponse])
async def list_contents(
    user_id: UUID,
    limit: int = 100,
    offset: int = 0,
    content_service: ContentService = Depends(get_content_service),
) -> list[ContentResponse]:
    """List a user's generated content, newest first."""
    try:
        contents = await content_service.get_contents(user_id, limit=limit, offset=offset)
        return [ContentResponse(**c) for c in contents]
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to retrieve contents: {str(e)}"
        )
