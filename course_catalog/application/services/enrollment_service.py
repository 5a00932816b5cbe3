"""
Enrollment service orchestrator.

Moves a (course, user) pair between NotEnrolled and Enrolled. Membership
uniqueness comes from the explicit check in ``enroll``; the course row is
locked for the duration of each mutation so concurrent requests for the
same course are checked one after another.

Dependencies: course_catalog.boundary.db.CRUD, course_catalog.core
System role: Enrollment use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from course_catalog.application.services.store_errors import store_operation
from course_catalog.boundary.db.CRUD.course_crud import course_crud
from course_catalog.core.exceptions import (
    AlreadyEnrolledError,
    CourseNotFoundError,
    NotMemberError,
    ValidationError,
)
from course_catalog.core.identifiers import parse_id

logger = logging.getLogger(__name__)


class EnrollmentService:
    """Enrollment service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize enrollment service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def enroll(self, course_id: str, user_id: UUID) -> None:
        """
        Enroll a user in a course.

        Args:
            course_id: Canonical course id
            user_id: Caller's user id

        Raises:
            InvalidIdentifierError: If course_id is malformed
            CourseNotFoundError: If no course has this id
            AlreadyEnrolledError: If the user is already enrolled
            PersistenceError: If the store fails
        """
        cid = parse_id(course_id)
        uid = str(user_id)

        async with store_operation(
            self.db, "enroll", "Failed to save enrollment.",
            course_id=course_id, user_id=uid,
        ):
            course = await course_crud.get_by_id_for_update(self.db, cid)
            if course is None:
                raise CourseNotFoundError(course_id)

            if uid in course.enrolled:
                raise AlreadyEnrolledError(course_id, uid)

            course.enrolled = [*course.enrolled, uid]
            await course_crud.save(self.db, course)
            await self.db.commit()

        logger.info(
            "User enrolled",
            extra={"course_id": course_id, "user_id": uid, "enrolled_count": len(course.enrolled)},
        )

    async def is_enrolled(self, course_id: str, user_id: UUID) -> bool:
        """
        Check whether a user is enrolled in a course.

        Args:
            course_id: Canonical course id
            user_id: User to look for

        Returns:
            bool: Membership flag

        Raises:
            InvalidIdentifierError: If course_id is malformed
            CourseNotFoundError: If no course has this id
            PersistenceError: If the store fails
        """
        cid = parse_id(course_id)

        async with store_operation(
            self.db, "is_enrolled", "Failed to fetch course.", course_id=course_id
        ):
            course = await course_crud.get_by_id(self.db, cid)
        if course is None:
            raise CourseNotFoundError(course_id)

        return str(user_id) in course.enrolled

    async def cancel_enrollment(self, course_id: str | None, user_id: UUID) -> None:
        """
        Remove a user's enrollment from a course.

        Exactly one occurrence is removed, even if the list (abnormally)
        holds duplicates.

        Args:
            course_id: Canonical course id
            user_id: Caller's user id

        Raises:
            ValidationError: If course_id is missing
            InvalidIdentifierError: If course_id is malformed
            CourseNotFoundError: If no course has this id
            NotMemberError: If the user is not enrolled
            PersistenceError: If the store fails
        """
        if not course_id:
            raise ValidationError(
                "Please, provide course id in request params.", field="id"
            )
        cid = parse_id(course_id)
        uid = str(user_id)

        async with store_operation(
            self.db, "cancel_enrollment", "Failed to save to the database.",
            course_id=course_id, user_id=uid,
        ):
            course = await course_crud.get_by_id_for_update(self.db, cid)
            if course is None:
                raise CourseNotFoundError(course_id)

            if uid not in course.enrolled:
                raise NotMemberError(course_id, uid)

            remaining = list(course.enrolled)
            remaining.remove(uid)
            course.enrolled = remaining
            await course_crud.save(self.db, course)
            await self.db.commit()

        logger.info("Enrollment cancelled", extra={"course_id": course_id, "user_id": uid})
