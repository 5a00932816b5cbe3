"""
Course CRUD operations.

Provides Create, Read, Update, Delete operations for CourseModel
with course-specific query methods.

Dependencies: sqlalchemy, course_catalog.boundary.db.models
System role: Course persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import String, cast, select
from sqlalchemy.ext.asyncio import AsyncSession

from course_catalog.boundary.db.CRUD.base_crud import BaseCRUD
from course_catalog.boundary.db.models.course_model import CourseModel


class CourseCRUD(BaseCRUD[CourseModel]):
    """
    CRUD operations for CourseModel.

    Extends BaseCRUD with listing order, locked reads for enrollment
    mutation, and role-scoped filters.
    """

    def __init__(self) -> None:
        """Initialize CourseCRUD with CourseModel."""
        super().__init__(CourseModel)

    async def list_recent(self, session: AsyncSession) -> Sequence[CourseModel]:
        """
        Retrieve all courses, most recently updated first.

        Args:
            session: Async database session

        Returns:
            Sequence of CourseModels
        """
        return await self.find(session, order_by=CourseModel.updated_at.desc())

    async def get_by_id_for_update(
        self,
        session: AsyncSession,
        course_id: UUID,
    ) -> CourseModel | None:
        """
        Retrieve a course and lock its row until the transaction ends.

        Concurrent enrollment changes to the same course queue behind the
        lock. The row is reloaded even if already in the session. Backends
        without row locks (SQLite) ignore the clause.

        Args:
            session: Async database session
            course_id: Course UUID

        Returns:
            CourseModel if found, None otherwise
        """
        stmt = (
            select(CourseModel)
            .where(CourseModel.id == course_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_by_provider(
        self,
        session: AsyncSession,
        provider_id: UUID,
    ) -> Sequence[CourseModel]:
        """
        Retrieve courses owned by a provider.

        Args:
            session: Async database session
            provider_id: Provider's user UUID

        Returns:
            Sequence of CourseModels
        """
        return await self.find(session, CourseModel.provider_id == provider_id)

    async def find_by_enrolled_user(
        self,
        session: AsyncSession,
        user_id: UUID,
    ) -> Sequence[CourseModel]:
        """
        Retrieve courses whose enrolled list contains a user.

        Matches the quoted id inside the serialized JSON array, which works
        on both PostgreSQL and SQLite.

        Args:
            session: Async database session
            user_id: Learner's user UUID

        Returns:
            Sequence of CourseModels
        """
        needle = f'"{user_id}"'
        return await self.find(
            session, cast(CourseModel.enrolled, String).contains(needle)
        )


course_crud = CourseCRUD()
