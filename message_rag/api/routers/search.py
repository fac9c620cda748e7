"""
Similarity search API endpoint.

Routes: POST /search

Dependencies: message_rag.application.services, message_rag.models
System role: RAG retrieval HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from message_rag.api.deps import get_retrieval_service
from message_rag.application.services.retrieval_service import RetrievalService
from message_rag.core.exceptions import (
    EmbeddingServiceError,
    RetrievalError,
    ValidationError,
)
from message_rag.models.search import SearchRequest, SearchResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/search", tags=["search"])


@router.post("", response_model=SearchResponse)
async def search(
    request: SearchRequest,
    retrieval_service: RetrievalService = Depends(get_retrieval_service),
) -> SearchResponse:
    """
    Return the stored fragments nearest to a query.

    Raises:
        HTTPException(400): Wrong vector dimension or k out of range
        HTTPException(502): Query embedding failed
        HTTPException(500): Search query failed
    """
    try:
        if request.embedding is not None:
            matches = await retrieval_service.search_by_vector(
                request.embedding,
                k=request.k,
                conversation_id=request.conversation_id,
            )
        else:
            matches = await retrieval_service.search_by_text(
                request.query,
                k=request.k,
                conversation_id=request.conversation_id,
            )
        return SearchResponse(matches=matches, total=len(matches))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except EmbeddingServiceError as e:
        raise HTTPException(status_code=502, detail=e.message)
    except RetrievalError as e:
        raise HTTPException(status_code=500, detail=e.message)
