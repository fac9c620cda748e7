"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from message_rag.boundary.db.CRUD import message_crud, embedding_crud

    # Use singleton instances
    messages = await message_crud.get_by_conversation(db, conversation_id)
"""

from message_rag.boundary.db.CRUD.base_crud import BaseCRUD
from message_rag.boundary.db.CRUD.conversation_crud import ConversationCRUD, conversation_crud
from message_rag.boundary.db.CRUD.message_crud import MessageCRUD, message_crud
from message_rag.boundary.db.CRUD.content_crud import GeneratedContentCRUD, content_crud
from message_rag.boundary.db.CRUD.embedding_crud import EmbeddingCRUD, embedding_crud

__all__ = [
    "BaseCRUD",
    "ConversationCRUD",
    "conversation_crud",
    "MessageCRUD",
    "message_crud",
    "GeneratedContentCRUD",
    "content_crud",
    "EmbeddingCRUD",
    "embedding_crud",
]
