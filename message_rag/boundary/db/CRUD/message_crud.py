"""
Message CRUD operations.

Provides message creation, conversation history reads and the backfill
query for messages that were saved without embeddings.

Dependencies: sqlalchemy, message_rag.boundary.db.models
System role: Message persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from message_rag.boundary.db.models.embedding_model import EmbeddingModel
from message_rag.boundary.db.models.message_model import MessageModel
from message_rag.boundary.db.CRUD.base_crud import BaseCRUD


class MessageCRUD(BaseCRUD[MessageModel]):
    """CRUD operations for MessageModel."""

    def __init__(self) -> None:
        """Initialize MessageCRUD with MessageModel."""
        super().__init__(MessageModel)

    async def get_by_conversation(
        self,
        session: AsyncSession,
        conversation_id: UUID,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[MessageModel]:
        """
        Retrieve messages of a conversation in chronological order.

        Args:
            session: Async database session
            conversation_id: Parent conversation ID
            limit: Maximum number of messages to return
            offset: Number of messages to skip

        Returns:
            Sequence of MessageModels, oldest first
        """
        stmt = (
            select(MessageModel)
            .where(MessageModel.conversation_id == conversation_id)
            .order_by(MessageModel.created_at.asc())
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def list_without_embeddings(
        self,
        session: AsyncSession,
        conversation_id: UUID | None = None,
        limit: int = 100,
    ) -> Sequence[MessageModel]:
        """
        Retrieve messages that have no embedding rows.

        These are messages whose ingestion failed or was never attempted.
        Messages with no indexable text also show up here.

        Args:
            session: Async database session
            conversation_id: Optional conversation scope
            limit: Maximum number of messages to return

        Returns:
            Sequence of MessageModels, oldest first
        """
        has_embeddings = (
            select(EmbeddingModel.id)
            .where(EmbeddingModel.message_id == MessageModel.id)
            .exists()
        )
        stmt = select(MessageModel).where(~has_embeddings)
        if conversation_id is not None:
            stmt = stmt.where(MessageModel.conversation_id == conversation_id)
        stmt = stmt.order_by(MessageModel.created_at.asc()).limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()


message_crud = MessageCRUD()
