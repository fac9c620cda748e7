"""
Conversation CRUD operations.

Dependencies: sqlalchemy, message_rag.boundary.db.models
System role: Conversation persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from message_rag.boundary.db.models.conversation_model import ConversationModel
from message_rag.boundary.db.CRUD.base_crud import BaseCRUD


class ConversationCRUD(BaseCRUD[ConversationModel]):
    """CRUD operations for ConversationModel."""

    def __init__(self) -> None:
        """Initialize ConversationCRUD with ConversationModel."""
        super().__init__(ConversationModel)

    async def get_by_user(
        self,
        session: AsyncSession,
        user_id: UUID,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[ConversationModel]:
        """
        Retrieve a user's conversations, newest first.

        Args:
            session: Async database session
            user_id: Owning user ID
            limit: Maximum number of conversations to return
            offset: Number of conversations to skip

        Returns:
            Sequence of ConversationModels
        """
        stmt = (
            select(ConversationModel)
            .where(ConversationModel.user_id == user_id)
            .order_by(ConversationModel.created_at.desc())
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()


conversation_crud = ConversationCRUD()
