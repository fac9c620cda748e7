"""
Message service orchestrator.

Message-creation workflow: persist the message, then index its text through
the embedding generator. Also serves conversation history and backfills
messages that were saved without embeddings.

Dependencies: message_rag.boundary.db.CRUD, message_rag.core.ingestion
System role: Message use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from message_rag.boundary.db.CRUD.conversation_crud import conversation_crud
from message_rag.boundary.db.CRUD.embedding_crud import embedding_crud
from message_rag.boundary.db.CRUD.message_crud import message_crud
from message_rag.boundary.db.models.message_model import MessageModel
from message_rag.core.exceptions import (
    ConversationNotFoundError,
    IngestionError,
    MessageNotFoundError,
)
from message_rag.core.ingestion.embedding_generator import EmbeddingGenerator
from message_rag.core.ingestion.models import IndexingStatus, MessageOwner
from message_rag.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

STATUS_MESSAGES = {
    IndexingStatus.INDEXED: "Message created successfully",
    IndexingStatus.SKIPPED: "Message created successfully",
    IndexingStatus.FAILED: "Message saved, but related content indexing failed",
}


def _to_dict(message: MessageModel) -> dict:
    return {
        "id": message.id,
        "text": message.text,
        "is_user_message": message.is_user_message,
        "conversation_id": message.conversation_id,
        "user_id": message.user_id,
        "created_at": message.created_at,
    }


class MessageService:
    """
    Message service orchestrator.

    The message row is committed before indexing starts. If indexing fails
    the message stays saved without embeddings and the failure is reported
    in the result; it can be indexed later with reindex_message.
    """

    def __init__(self, db: AsyncSession, generator: EmbeddingGenerator) -> None:
        """
        Initialize message service.

        Args:
            db: Async SQLAlchemy session
            generator: Embedding generator used to index message text
        """
        self.db = db
        self.generator = generator

    async def create_message(
        self,
        conversation_id: UUID,
        text: str,
        user_id: UUID,
        is_user_message: bool = True,
    ) -> dict:
        """
        Create a message and index its text.

        Args:
            conversation_id: Parent conversation ID
            text: Message text
            user_id: Author user ID
            is_user_message: False for assistant responses

        Returns:
            dict: {"message": message dict, "embedding_count": int,
            "indexing_status": IndexingStatus, "status_message": str}

        Raises:
            ConversationNotFoundError: If conversation does not exist
        """
        if not await conversation_crud.exists(self.db, conversation_id):
            raise ConversationNotFoundError(str(conversation_id))

        message = await message_crud.create(
            self.db,
            conversation_id=conversation_id,
            text=text,
            user_id=user_id,
            is_user_message=is_user_message,
        )
        await self.db.commit()

        # Snapshot before indexing: a failed batch rolls back and expires the session.
        message_data = _to_dict(message)

        status, embedding_count = await self._index(message_data["id"], text, conversation_id)

        return {
            "message": message_data,
            "embedding_count": embedding_count,
            "indexing_status": status,
            "status_message": STATUS_MESSAGES[status],
        }

    async def get_messages(self, conversation_id: UUID) -> list[dict]:
        """
        Get a conversation's messages, oldest first.

        Raises:
            ConversationNotFoundError: If conversation does not exist
        """
        if not await conversation_crud.exists(self.db, conversation_id):
            raise ConversationNotFoundError(str(conversation_id))

        messages = await message_crud.get_by_conversation(self.db, conversation_id)
        return [_to_dict(m) for m in messages]

    async def reindex_message(self, message_id: UUID) -> dict:
        """
        Index a stored message that has no embeddings yet.

        Messages that already have embeddings are left untouched.

        Returns:
            dict: {"message_id", "embedding_count", "indexing_status"}

        Raises:
            MessageNotFoundError: If message does not exist
            EmbeddingServiceError: When embedding generation fails
            PersistenceError: When the batched insert fails
        """
        message = await message_crud.get_by_id(self.db, message_id)
        if not message:
            raise MessageNotFoundError(str(message_id))

        existing = await embedding_crud.count_by_message(self.db, message_id)
        if existing:
            return {
                "message_id": message_id,
                "embedding_count": existing,
                "indexing_status": IndexingStatus.INDEXED,
            }

        result = await self.generator.ingest(
            self.db, message.text, MessageOwner(message_id=message_id)
        )
        status = IndexingStatus.INDEXED if result.persisted else IndexingStatus.SKIPPED
        return {
            "message_id": message_id,
            "embedding_count": len(result.embedding_ids),
            "indexing_status": status,
        }

    async def reindex_pending(
        self,
        conversation_id: UUID | None = None,
        limit: int = 100,
    ) -> dict[str, int]:
        """
        Backfill embeddings for messages that have none.

        Each message is attempted once; failures are logged and counted.

        Returns:
            dict[str, int]: Counts keyed by IndexingStatus value
        """
        pending = await message_crud.list_without_embeddings(
            self.db,
            conversation_id=conversation_id,
            limit=limit,
        )
        targets = [(m.id, m.text, m.conversation_id) for m in pending]

        counts = {status.value: 0 for status in IndexingStatus}
        for message_id, text, message_conversation_id in targets:
            status, _ = await self._index(message_id, text, message_conversation_id)
            counts[status.value] += 1
        return counts

    async def _index(
        self,
        message_id: UUID,
        text: str,
        conversation_id: UUID,
    ) -> tuple[IndexingStatus, int]:
        try:
            result = await self.generator.ingest(
                self.db, text, MessageOwner(message_id=message_id)
            )
        except IngestionError as e:
            log_exception_with_context(
                logger, "Message indexing failed", e,
                message_id=str(message_id),
                conversation_id=str(conversation_id),
            )
            return IndexingStatus.FAILED, 0

        if not result.persisted:
            return IndexingStatus.SKIPPED, 0
        return IndexingStatus.INDEXED, len(result.embedding_ids)
