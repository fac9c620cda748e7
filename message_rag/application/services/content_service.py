"""
Generated content service orchestrator.

Stores assistant-generated content and indexes it as system knowledge,
using the same ingestion path as conversation messages.

Dependencies: message_rag.boundary.db.CRUD, message_rag.core.ingestion
System role: Generated content use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from message_rag.boundary.db.CRUD.content_crud import content_crud
from message_rag.boundary.db.CRUD.conversation_crud import conversation_crud
from message_rag.boundary.db.models.content_model import GeneratedContentModel
from message_rag.core.exceptions import (
    ConversationNotFoundError,
    IngestionError,
    ValidationError,
)
from message_rag.core.ingestion.embedding_generator import EmbeddingGenerator
from message_rag.core.ingestion.models import GeneratedContentOwner, IndexingStatus
from message_rag.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


def _to_dict(content: GeneratedContentModel) -> dict:
    return {
        "id": content.id,
        "title": content.title,
        "prompt": content.prompt,
        "content": content.content,
        "conversation_id": content.conversation_id,
        "user_id": content.user_id,
        "created_at": content.created_at,
        "updated_at": content.updated_at,
    }


class ContentService:
    """Generated content service orchestrator."""

    def __init__(self, db: AsyncSession, generator: EmbeddingGenerator) -> None:
        """
        Initialize content service.

        Args:
            db: Async SQLAlchemy session
            generator: Embedding generator used to index content text
        """
        self.db = db
        self.generator = generator

    async def create_content(
        self,
        user_id: UUID,
        content: str,
        title: str | None = None,
        prompt: str | None = None,
        conversation_id: UUID | None = None,
    ) -> dict:
        """
        Persist generated content, then index it.

        Indexing failures leave the record saved and are reported through
        indexing_status, as for messages.

        Returns:
            dict: {"content": content dict, "embedding_count": int,
            "indexing_status": IndexingStatus}

        Raises:
            ValidationError: If content is blank
            ConversationNotFoundError: If conversation_id does not exist
        """
        if not content or not content.strip():
            raise ValidationError("Content cannot be empty", field="content")

        if conversation_id is not None and not await conversation_crud.exists(
            self.db, conversation_id
        ):
            raise ConversationNotFoundError(str(conversation_id))

        record = await content_crud.create(
            self.db,
            user_id=user_id,
            content=content,
            title=title,
            prompt=prompt,
            conversation_id=conversation_id,
        )
        await self.db.commit()
        content_data = _to_dict(record)

        try:
            result = await self.generator.ingest(
                self.db, content, GeneratedContentOwner(content_id=content_data["id"])
            )
        except IngestionError as e:
            log_exception_with_context(
                logger, "Generated content indexing failed", e,
                content_id=str(content_data["id"]),
            )
            return {
                "content": content_data,
                "embedding_count": 0,
                "indexing_status": IndexingStatus.FAILED,
            }

        status = IndexingStatus.INDEXED if result.persisted else IndexingStatus.SKIPPED
        return {
            "content": content_data,
            "embedding_count": len(result.embedding_ids),
            "indexing_status": status,
        }

    async def get_contents(
        self,
        user_id: UUID,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[dict]:
        """Get a user's generated content, newest first."""
        records = await content_crud.get_by_user(self.db, user_id, limit=limit, offset=offset)
        return [_to_dict(r) for r in records]
