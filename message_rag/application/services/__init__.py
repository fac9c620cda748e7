"""Service orchestrators."""

from .content_service import ContentService
from .conversation_service import ConversationService
from .message_service import MessageService
from .retrieval_service import RetrievalService

__all__ = [
    "ContentService",
    "ConversationService",
    "MessageService",
    "RetrievalService",
]
