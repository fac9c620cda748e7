"""
Conversation ORM model.

Represents a titled chat thread owned by a user. Messages and generated
content are scoped to a conversation.

Dependencies: sqlalchemy, message_rag.boundary.db.base
System role: Conversation persistence and retrieval scope
"""

import uuid

from sqlalchemy import Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from message_rag.boundary.db.base import Base, TimestampMixin, UUIDMixin


class ConversationModel(Base, UUIDMixin, TimestampMixin):
    """
    Conversation ORM model.

    Deleting a conversation cascades to its messages (and through them to
    their embeddings) and to generated content created within it.

    Attributes:
        id: UUID primary key (auto-generated)
        title: Display title
        user_id: Owning user (opaque ID issued by the auth provider)
        created_at: Creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)
    """

    __tablename__ = "conversations"

    title: Mapped[str] = mapped_column(Text, nullable=False)

    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        nullable=False,
        index=True,
    )

    messages = relationship(
        "MessageModel",
        back_populates="conversation",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    generated_contents = relationship(
        "GeneratedContentModel",
        back_populates="conversation",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
