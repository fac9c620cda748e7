"""
Embedding CRUD operations.

Batched insert of fragment vectors for one owner and pgvector cosine
nearest-neighbour search.

Dependencies: sqlalchemy, pgvector, message_rag.boundary.db.models
System role: Vector store persistence and similarity search
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from message_rag.boundary.db.models.content_model import GeneratedContentModel
from message_rag.boundary.db.models.embedding_model import EmbeddingModel
from message_rag.boundary.db.models.message_model import MessageModel
from message_rag.boundary.db.CRUD.base_crud import BaseCRUD
from message_rag.core.ingestion.models import EmbeddedFragment, EmbeddingOwner


class EmbeddingCRUD(BaseCRUD[EmbeddingModel]):
    """CRUD operations for EmbeddingModel."""

    def __init__(self) -> None:
        """Initialize EmbeddingCRUD with EmbeddingModel."""
        super().__init__(EmbeddingModel)

    async def create_many(
        self,
        session: AsyncSession,
        owner: EmbeddingOwner,
        fragments: Sequence[EmbeddedFragment],
    ) -> list[EmbeddingModel]:
        """
        Stage one embedding row per fragment and flush them as a batch.

        Does not commit. Rows are returned in fragment order.

        Args:
            session: Async database session
            owner: Message or generated content owning every row
            fragments: Embedded fragments in positional order

        Returns:
            list[EmbeddingModel]: Flushed rows with generated IDs
        """
        owner_columns = owner.as_columns()
        records = [
            EmbeddingModel(
                embedding=fragment.embedding,
                content=fragment.content,
                **owner_columns,
            )
            for fragment in fragments
        ]
        session.add_all(records)
        await session.flush()
        return records

    async def get_by_ids(
        self,
        session: AsyncSession,
        ids: Sequence[UUID],
    ) -> list[EmbeddingModel]:
        """
        Retrieve embedding rows by ID, preserving the order of ids.

        Missing IDs are skipped.
        """
        if not ids:
            return []
        stmt = select(EmbeddingModel).where(EmbeddingModel.id.in_(ids))
        result = await session.execute(stmt)
        by_id = {record.id: record for record in result.scalars().all()}
        return [by_id[id] for id in ids if id in by_id]

    async def count_by_message(self, session: AsyncSession, message_id: UUID) -> int:
        """Count embedding rows owned by a message."""
        stmt = (
            select(func.count())
            .select_from(EmbeddingModel)
            .where(EmbeddingModel.message_id == message_id)
        )
        result = await session.execute(stmt)
        return result.scalar_one()

    async def count_by_content(self, session: AsyncSession, content_id: UUID) -> int:
        """Count embedding rows owned by a generated content record."""
        stmt = (
            select(func.count())
            .select_from(EmbeddingModel)
            .where(EmbeddingModel.content_id == content_id)
        )
        result = await session.execute(stmt)
        return result.scalar_one()

    async def search_nearest(
        self,
        session: AsyncSession,
        query_vector: Sequence[float],
        k: int,
        conversation_id: UUID | None = None,
    ) -> list[tuple[EmbeddingModel, float]]:
        """
        Find the k nearest embeddings by cosine distance.

        Read-only. Ordered by ascending distance, ties broken by newest
        created_at. With conversation_id, only rows owned by a message or
        generated content of that conversation are considered.

        Args:
            session: Async database session
            query_vector: Query embedding (same dimension as the column)
            k: Maximum number of rows
            conversation_id: Optional conversation scope

        Returns:
            list[tuple[EmbeddingModel, float]]: (row, cosine distance) pairs
        """
        distance = EmbeddingModel.embedding.cosine_distance(list(query_vector)).label("distance")
        stmt = select(EmbeddingModel, distance)

        if conversation_id is not None:
            stmt = (
                stmt.outerjoin(MessageModel, EmbeddingModel.message_id == MessageModel.id)
                .outerjoin(
                    GeneratedContentModel,
                    EmbeddingModel.content_id == GeneratedContentModel.id,
                )
                .where(
                    or_(
                        MessageModel.conversation_id == conversation_id,
                        GeneratedContentModel.conversation_id == conversation_id,
                    )
                )
            )

        stmt = stmt.order_by(distance.asc(), EmbeddingModel.created_at.desc()).limit(k)
        result = await session.execute(stmt)
        return [(record, float(dist)) for record, dist in result.all()]


embedding_crud = EmbeddingCRUD()
