"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin, CreatedAtMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - ConversationModel, MessageModel, GeneratedContentModel, EmbeddingModel: Domain entities
  - conversation_crud, message_crud, content_crud, embedding_crud: CRUD operation singletons

Dependencies: sqlalchemy, pgvector, message_rag.configs
System role: Database adapter providing persistent storage for conversations,
messages, generated content and their embeddings.
"""

from message_rag.boundary.db.base import Base, CreatedAtMixin, TimestampMixin, UUIDMixin
from message_rag.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from message_rag.boundary.db.models import (
    ConversationModel,
    EmbeddingModel,
    GeneratedContentModel,
    MessageModel,
)
from message_rag.boundary.db.CRUD import (
    BaseCRUD,
    ConversationCRUD,
    EmbeddingCRUD,
    GeneratedContentCRUD,
    MessageCRUD,
    content_crud,
    conversation_crud,
    embedding_crud,
    message_crud,
)

__all__ = [
    # Base classes
    "Base",
    "CreatedAtMixin",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "ConversationModel",
    "MessageModel",
    "GeneratedContentModel",
    "EmbeddingModel",
    # CRUD classes
    "BaseCRUD",
    "ConversationCRUD",
    "MessageCRUD",
    "GeneratedContentCRUD",
    "EmbeddingCRUD",
    # CRUD singletons
    "conversation_crud",
    "message_crud",
    "content_crud",
    "embedding_crud",
]
