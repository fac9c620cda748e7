"""
Message ORM model.

One turn in a conversation, authored by the user or the assistant.
Messages are immutable after insert.

Dependencies: sqlalchemy, message_rag.boundary.db.base
System role: Message persistence and embedding ownership
"""

import uuid

from sqlalchemy import Boolean, ForeignKey, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from message_rag.boundary.db.base import Base, CreatedAtMixin, UUIDMixin


class MessageModel(Base, UUIDMixin, CreatedAtMixin):
    """
    Message ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        text: Raw message text, the ingestion source
        is_user_message: True for user turns, False for assistant turns
        conversation_id: Parent conversation (cascade delete)
        user_id: Author/owner user ID
        created_at: Creation timestamp (UTC)

    Relationships:
        conversation: Parent ConversationModel
        embeddings: EmbeddingModel rows produced from this message (cascade delete)
    """

    __tablename__ = "messages"

    text: Mapped[str] = mapped_column(Text, nullable=False)

    is_user_message: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
    )

    conversation_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("conversations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        nullable=False,
    )

    conversation = relationship("ConversationModel", back_populates="messages")
    embeddings = relationship(
        "EmbeddingModel",
        back_populates="message",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
