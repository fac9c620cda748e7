"""
Embedding ORM model.

Stores one fragment vector together with the fragment text and exactly one
owner: a message or a generated content record.

Dependencies: sqlalchemy, pgvector, message_rag.boundary.db.base
System role: Vector store table for similarity search
"""

import uuid

from pgvector.sqlalchemy import Vector
from sqlalchemy import JSON, CheckConstraint, ForeignKey, Index, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from message_rag.boundary.db.base import Base, CreatedAtMixin, UUIDMixin
from message_rag.configs.embedding import EMBEDDING_DIMENSIONS

# JSON on SQLite keeps the in-memory test database usable without pgvector.
EmbeddingVector = Vector(EMBEDDING_DIMENSIONS).with_variant(JSON(), "sqlite")


class EmbeddingModel(Base, UUIDMixin, CreatedAtMixin):
    """
    Embedding ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        embedding: vector(1536), cosine-indexed with ivfflat
        content: Fragment text that produced the vector
        message_id: Owning message (cascade delete), mutually exclusive with content_id
        content_id: Owning generated content (cascade delete), mutually exclusive with message_id
        created_at: Insert timestamp (UTC)

    Constraints:
        embeddings_single_owner_check: exactly one of message_id/content_id is set
    """

    __tablename__ = "embeddings"
    __table_args__ = (
        CheckConstraint(
            "(message_id IS NULL) <> (content_id IS NULL)",
            name="embeddings_single_owner_check",
        ),
        Index(
            "embeddings_vector_idx",
            "embedding",
            postgresql_using="ivfflat",
            postgresql_with={"lists": 100},
            postgresql_ops={"embedding": "vector_cosine_ops"},
        ),
    )

    embedding: Mapped[list[float]] = mapped_column(EmbeddingVector, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    message_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("messages.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )

    content_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("generated_content.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )

    message = relationship("MessageModel", back_populates="embeddings")
    generated_content = relationship("GeneratedContentModel", back_populates="embeddings")
