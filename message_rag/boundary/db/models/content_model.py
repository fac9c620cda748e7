"""
Generated content ORM model.

Marketing copy, posts and other assistant-generated artefacts that are
indexed as system knowledge alongside conversation messages.

Dependencies: sqlalchemy, message_rag.boundary.db.base
System role: Generated content persistence and embedding ownership
"""

import uuid

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from message_rag.boundary.db.base import Base, TimestampMixin, UUIDMixin


class GeneratedContentModel(Base, UUIDMixin, TimestampMixin):
    """
    Generated content ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        title: Optional display title
        prompt: Prompt that produced the content, if known
        content: Generated text, the ingestion source
        conversation_id: Conversation the content was generated in (optional)
        user_id: Owning user ID
    """

    __tablename__ = "generated_content"

    title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    prompt: Mapped[str | None] = mapped_column(Text, nullable=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    conversation_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("conversations.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        nullable=False,
        index=True,
    )

    conversation = relationship("ConversationModel", back_populates="generated_contents")
    embeddings = relationship(
        "EmbeddingModel",
        back_populates="generated_content",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
