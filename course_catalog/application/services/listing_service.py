"""
Role-scoped course listing.

Learners see the courses they are enrolled in; providers see the courses
they own.

Dependencies: course_catalog.boundary.db.CRUD, course_catalog.models.user
System role: "My courses" query orchestration
"""

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from course_catalog.application.services.course_service import serialize_course
from course_catalog.application.services.store_errors import store_operation
from course_catalog.boundary.db.CRUD.course_crud import course_crud
from course_catalog.core.exceptions import InvalidRoleError
from course_catalog.models.user import CurrentUser, UserRole

logger = logging.getLogger(__name__)


class ListingService:
    """Role-scoped listing orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def my_courses(self, user: CurrentUser) -> list[dict[str, Any]]:
        """
        List the courses visible to a caller.

        Args:
            user: Authenticated caller

        Returns:
            list[dict]: External-form courses, in store order

        Raises:
            InvalidRoleError: If the role is missing or unrecognized
            PersistenceError: If the store query fails
        """
        if user.role not in (UserRole.LEARNER, UserRole.PROVIDER):
            raise InvalidRoleError(user.role)

        async with store_operation(
            self.db, "my_courses", "Failed to fetch courses.", user_id=str(user.id)
        ):
            if user.role == UserRole.LEARNER:
                courses = await course_crud.find_by_enrolled_user(self.db, user.id)
            else:
                courses = await course_crud.find_by_provider(self.db, user.id)

        logger.info(
            "Fetched caller courses",
            extra={"user_id": str(user.id), "role": user.role, "count": len(courses)},
        )
        return [serialize_course(c) for c in courses]
