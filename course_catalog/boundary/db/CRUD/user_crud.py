"""
User read operations.

Dependencies: sqlalchemy, course_catalog.boundary.db.models
System role: Public user projections for enrollment resolution
"""

from typing import Any, Iterable
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from course_catalog.boundary.db.CRUD.base_crud import BaseCRUD
from course_catalog.boundary.db.models.user_model import UserModel

# Columns safe to return to other users.
PUBLIC_USER_COLUMNS = (UserModel.id, UserModel.name, UserModel.email, UserModel.role)


class UserCRUD(BaseCRUD[UserModel]):
    """Read-only queries against the users table."""

    def __init__(self) -> None:
        """Initialize UserCRUD with UserModel."""
        super().__init__(UserModel)

    async def get_summaries(
        self,
        session: AsyncSession,
        ids: Iterable[UUID],
    ) -> list[dict[str, Any]]:
        """
        Retrieve public fields for the given users.

        Credentials and timestamps are never selected. Unknown ids are skipped.

        Args:
            session: Async database session
            ids: User UUIDs

        Returns:
            list[dict]: Storage-form rows (id, name, email, role)
        """
        ids = list(ids)
        if not ids:
            return []
        stmt = select(*PUBLIC_USER_COLUMNS).where(UserModel.id.in_(ids))
        result = await session.execute(stmt)
        return [dict(row) for row in result.mappings().all()]


user_crud = UserCRUD()
