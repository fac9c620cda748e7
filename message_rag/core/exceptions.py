"""
Exception hierarchy for the message RAG service.

Every error carries a human-readable message plus a details dict with the
IDs involved (conversation, message, owner). The HTTP layer maps the
subclasses onto status codes.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class MessageRagException(Exception):
    """Root of the application error hierarchy."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(MessageRagException):
    """Input rejected before any work was done (blank title, bad k, wrong vector size)."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class ConversationNotFoundError(MessageRagException):
    """Raised when a conversation cannot be found."""

    def __init__(self, conversation_id: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["conversation_id"] = conversation_id
        super().__init__(f"Conversation not found: {conversation_id}", details)


class MessageNotFoundError(MessageRagException):
    """Raised when a message cannot be found."""

    def __init__(self, message_id: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["message_id"] = message_id
        super().__init__(f"Message not found: {message_id}", details)


class IngestionError(MessageRagException):
    """Base exception for embedding ingestion errors."""

    def __init__(
        self,
        message: str,
        owner_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize ingestion error.

        Args:
            message: Error message
            owner_id: ID of the message or content record being ingested
            details: Additional context
        """
        details = details or {}
        if owner_id:
            details["owner_id"] = owner_id
        super().__init__(message, details)


class EmbeddingServiceError(IngestionError):
    """Raised when the hosted embedding call fails, times out or returns a bad shape."""

    def __init__(
        self,
        message: str,
        fragments: list[str] | None = None,
        owner_id: str | None = None,
        model: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize embedding service error.

        Args:
            message: Error message
            fragments: Fragment texts submitted in the failed request
            owner_id: ID of the owning message or content record
            model: Embedding model identifier
            details: Additional context
        """
        details = details or {}
        if fragments is not None:
            details["fragments"] = fragments
        if model:
            details["model"] = model
        super().__init__(message, owner_id, details)


class PersistenceError(IngestionError):
    """Raised when the batched embedding insert fails."""

    def __init__(
        self,
        message: str,
        owner_id: str | None = None,
        record_count: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize persistence error.

        Args:
            message: Error message
            owner_id: ID of the owning message or content record
            record_count: Number of records in the rejected batch
            details: Additional context
        """
        details = details or {}
        if record_count is not None:
            details["record_count"] = record_count
        super().__init__(message, owner_id, details)


class RetrievalError(MessageRagException):
    """Raised when similarity search fails."""

    def __init__(
        self,
        message: str,
        conversation_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize retrieval error.

        Args:
            message: Error message
            conversation_id: Conversation scope of the failed search
            details: Additional context
        """
        details = details or {}
        if conversation_id:
            details["conversation_id"] = conversation_id
        super().__init__(message, details)
