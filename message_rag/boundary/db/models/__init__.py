"""
Database models package.

Exports:
  - ConversationModel: Conversation ORM model
  - MessageModel: Message ORM model
  - GeneratedContentModel: Generated content ORM model
  - EmbeddingModel: Vector store ORM model

Dependencies: sqlalchemy, pgvector, message_rag.boundary.db.base
System role: Database model definitions for domain entities
"""

from message_rag.boundary.db.models.conversation_model import ConversationModel
from message_rag.boundary.db.models.message_model import MessageModel
from message_rag.boundary.db.models.content_model import GeneratedContentModel
from message_rag.boundary.db.models.embedding_model import EmbeddingModel

__all__ = [
    "ConversationModel",
    "MessageModel",
    "GeneratedContentModel",
    "EmbeddingModel",
]
