"""
Generated content CRUD operations.

Dependencies: sqlalchemy, message_rag.boundary.db.models
System role: Generated content persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from message_rag.boundary.db.models.content_model import GeneratedContentModel
from message_rag.boundary.db.CRUD.base_crud import BaseCRUD


class GeneratedContentCRUD(BaseCRUD[GeneratedContentModel]):
    """CRUD operations for GeneratedContentModel."""

    def __init__(self) -> None:
        """Initialize GeneratedContentCRUD with GeneratedContentModel."""
        super().__init__(GeneratedContentModel)

    async def get_by_user(
        self,
        session: AsyncSession,
        user_id: UUID,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[GeneratedContentModel]:
        """
        Retrieve a user's generated content, newest first.

        Args:
            session: Async database session
            user_id: Owning user ID
            limit: Maximum number of records to return
            offset: Number of records to skip

        Returns:
            Sequence of GeneratedContentModels
        """
        stmt = (
            select(GeneratedContentModel)
            .where(GeneratedContentModel.user_id == user_id)
            .order_by(GeneratedContentModel.created_at.desc())
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()


content_crud = GeneratedContentCRUD()
