"""
Generic async CRUD over one ORM model.

Model-specific CRUD classes inherit from BaseCRUD and are exposed as
module-level singletons.

Dependencies: sqlalchemy
System role: Foundation for all database CRUD operations
"""

from typing import Generic, TypeVar
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from message_rag.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Primary-key operations shared by every model.

    Nothing here commits: methods flush at most, and the calling service
    decides where the transaction ends.
    """

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    async def create(self, session: AsyncSession, **values) -> ModelT:
        """
        Insert one row and return it with database defaults loaded.

        Args:
            session: Async database session
            **values: Column values for the model constructor

        Returns:
            ModelT: Flushed and refreshed instance
        """
        instance = self.model(**values)
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def get_by_id(self, session: AsyncSession, id: UUID) -> ModelT | None:
        """Return the row with primary key id, or None."""
        result = await session.execute(select(self.model).where(self.model.id == id))
        return result.scalar_one_or_none()

    async def delete_by_id(self, session: AsyncSession, id: UUID) -> bool:
        """
        Delete the row with primary key id.

        Child rows go with it through ON DELETE CASCADE.

        Returns:
            bool: False when no row matched
        """
        result = await session.execute(delete(self.model).where(self.model.id == id))
        return result.rowcount > 0

    async def exists(self, session: AsyncSession, id: UUID) -> bool:
        """Check for a row with primary key id without loading it."""
        result = await session.execute(select(self.model.id).where(self.model.id == id))
        return result.scalar_one_or_none() is not None

    async def count(self, session: AsyncSession) -> int:
        """Number of rows in the model's table."""
        result = await session.execute(select(func.count()).select_from(self.model))
        return result.scalar_one()
