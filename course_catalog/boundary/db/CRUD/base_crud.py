"""
Generic async repository over one ORM model.

Model-specific CRUD classes subclass this and add their own queries.
Every method flushes but never commits; the service that owns the
request session decides when the unit of work ends.

Dependencies: sqlalchemy, uuid
System role: Foundation for all database CRUD operations
"""

from typing import Any, Generic, Sequence, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from course_catalog.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Generic repository for a model with a UUID ``id`` primary key.

    Attributes:
        model: ORM class the repository reads and writes
    """

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    async def create(self, session: AsyncSession, **values: Any) -> ModelT:
        """
        Insert a row and load its generated id and timestamps.

        Args:
            session: Request-scoped session
            **values: Column values keyed by attribute name

        Returns:
            The new, refreshed instance
        """
        return await self.save(session, self.model(**values))

    async def get_by_id(self, session: AsyncSession, record_id: UUID) -> ModelT | None:
        """Return the row with this primary key, or None."""
        result = await session.execute(
            select(self.model).where(self.model.id == record_id)
        )
        return result.scalar_one_or_none()

    async def find(
        self,
        session: AsyncSession,
        *criteria: Any,
        order_by: Any = None,
    ) -> Sequence[ModelT]:
        """
        Return rows matching every criterion.

        Args:
            session: Request-scoped session
            *criteria: Boolean clauses, ANDed together
            order_by: Optional ordering clause

        Returns:
            Matching instances; unordered unless ``order_by`` is given
        """
        stmt = select(self.model).where(*criteria)
        if order_by is not None:
            stmt = stmt.order_by(order_by)
        return (await session.execute(stmt)).scalars().all()

    async def update_by_id(
        self,
        session: AsyncSession,
        record_id: UUID,
        **values: Any,
    ) -> ModelT | None:
        """
        Assign ``values`` onto the row with this primary key.

        Changes go through the loaded instance rather than a bulk UPDATE so
        ``onupdate`` hooks (``updated_at``) run.

        Returns:
            The refreshed instance, or None when no row matched
        """
        instance = await self.get_by_id(session, record_id)
        if instance is None:
            return None
        for name, value in values.items():
            setattr(instance, name, value)
        return await self.save(session, instance)

    async def delete_by_id(self, session: AsyncSession, record_id: UUID) -> ModelT | None:
        """
        Delete the row with this primary key.

        Returns:
            The detached instance as it was before deletion, or None
        """
        instance = await self.get_by_id(session, record_id)
        if instance is None:
            return None
        await session.delete(instance)
        await session.flush()
        return instance

    async def save(self, session: AsyncSession, instance: ModelT) -> ModelT:
        """Flush pending changes on ``instance`` and reload server-side values."""
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance
