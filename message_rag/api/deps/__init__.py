"""API-specific dependencies."""

from .dependencies import (
    get_content_service,
    get_conversation_service,
    get_embedding_generator,
    get_message_service,
    get_retrieval_service,
    get_service_cache,
    get_settings_dependency,
)

__all__ = [
    "get_content_service",
    "get_conversation_service",
    "get_embedding_generator",
    "get_message_service",
    "get_retrieval_service",
    "get_service_cache",
    "get_settings_dependency",
]
