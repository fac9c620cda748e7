"""
Conversation service orchestrator.

Coordinates conversation lifecycle operations.

Dependencies: message_rag.boundary.db.CRUD
System role: Conversation use case orchestration
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from message_rag.boundary.db.CRUD.conversation_crud import conversation_crud
from message_rag.boundary.db.models.conversation_model import ConversationModel
from message_rag.core.exceptions import ConversationNotFoundError, ValidationError


def _to_dict(conversation: ConversationModel) -> dict:
    return {
        "id": conversation.id,
        "title": conversation.title,
        "user_id": conversation.user_id,
        "created_at": conversation.created_at,
        "updated_at": conversation.updated_at,
    }


class ConversationService:
    """Conversation service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize conversation service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def create_conversation(self, user_id: UUID, title: str) -> dict:
        """
        Create and commit a new conversation.

        Args:
            user_id: Owning user ID
            title: Conversation title (non-blank)

        Returns:
            dict: Conversation data with id, title, user_id, created_at, updated_at

        Raises:
            ValidationError: If title is blank
        """
        if not title or not title.strip():
            raise ValidationError("Conversation title cannot be empty", field="title")

        conversation = await conversation_crud.create(
            self.db,
            user_id=user_id,
            title=title.strip(),
        )
        await self.db.commit()
        return _to_dict(conversation)

    async def get_conversation(self, conversation_id: UUID) -> dict:
        """
        Get conversation by ID.

        Raises:
            ConversationNotFoundError: If conversation not found
        """
        conversation = await conversation_crud.get_by_id(self.db, conversation_id)
        if not conversation:
            raise ConversationNotFoundError(str(conversation_id))
        return _to_dict(conversation)

    async def get_conversations(
        self,
        user_id: UUID,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[dict]:
        """
        Get a user's conversations, newest first.

        Args:
            user_id: Owning user ID
            limit: Maximum number of conversations to return
            offset: Number of conversations to skip

        Returns:
            list[dict]: Conversation dicts
        """
        conversations = await conversation_crud.get_by_user(
            self.db,
            user_id,
            limit=limit,
            offset=offset,
        )
        return [_to_dict(c) for c in conversations]

    async def delete_conversation(self, conversation_id: UUID) -> bool:
        """
        Delete conversation by ID.

        Messages, generated content and their embeddings are removed by
        cascading foreign keys.

        Returns:
            bool: True when deleted

        Raises:
            ConversationNotFoundError: If conversation not found
        """
        deleted = await conversation_crud.delete_by_id(self.db, conversation_id)
        if not deleted:
            raise ConversationNotFoundError(str(conversation_id))

        await self.db.commit()
        return True
