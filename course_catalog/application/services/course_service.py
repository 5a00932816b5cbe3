"""
Course service orchestrator.

Validates and normalizes course payloads, then runs the course lifecycle
(list, get, create, update, delete) against the store. Payloads arrive and
leave in external (camelCase) form; the store sees storage form only.

Dependencies: course_catalog.boundary.db.CRUD, course_catalog.core
System role: Course use case orchestration
"""

import logging
import uuid
from typing import Any, Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from course_catalog.application.services.store_errors import store_operation
from course_catalog.boundary.db.CRUD.course_crud import course_crud
from course_catalog.boundary.db.CRUD.user_crud import user_crud
from course_catalog.boundary.db.models.course_model import WRITABLE_COLUMNS, CourseModel
from course_catalog.configs.course import CourseSettings
from course_catalog.core.coercion import (
    parse_max_students,
    parse_price,
    parse_time_of_day,
    parse_timestamp,
)
from course_catalog.core.exceptions import CourseNotFoundError, ValidationError
from course_catalog.core.field_case import (
    is_provided,
    to_external_form,
    to_storage_form,
)
from course_catalog.core.identifiers import is_valid_id, parse_id
from course_catalog.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)

FULL_DETAIL_FIELDS = ("title", "description", "shortDescription", "level")


def serialize_course(course: CourseModel) -> dict[str, Any]:
    """
    Convert a course row to its external form.

    Args:
        course: Loaded CourseModel

    Returns:
        dict: camelCase mapping with absent/empty fields dropped
    """
    storage = course.to_storage_dict()
    storage["enrolled"] = list(course.enrolled or [])
    return to_external_form(storage)


class CourseService:
    """Course service orchestrator."""

    def __init__(self, db: AsyncSession, settings: CourseSettings | None = None) -> None:
        """
        Initialize course service with async database session.

        Args:
            db: Async SQLAlchemy session
            settings: Course rules; defaults to title-only create validation
        """
        self.db = db
        self.settings = settings or CourseSettings()

    def normalize_payload(
        self,
        payload: Mapping[str, Any],
        *,
        creating: bool,
    ) -> dict[str, Any]:
        """
        Validate and coerce an external payload into storage form.

        Absent and empty values are dropped first, so on update they leave
        the stored field untouched.

        Args:
            payload: camelCase mapping from the caller
            creating: Enforce required fields

        Returns:
            dict: snake_case mapping ready for the store

        Raises:
            ValidationError: Missing title, unknown key, or uncoercible value
            InvalidIdentifierError: Malformed providerId
        """
        fields = {key: val for key, val in payload.items() if is_provided(val)}

        if creating:
            if self.settings.require_full_details:
                if any(name not in fields for name in FULL_DETAIL_FIELDS):
                    raise ValidationError(
                        "Course must have title, description, shortDescription and level properties.",
                        field="title",
                    )
            elif "title" not in fields:
                raise ValidationError("Course must have a title.", field="title")

        if "price" in fields:
            fields["price"] = parse_price(fields["price"]).unwrap("price")
        if "maxStudents" in fields:
            fields["maxStudents"] = parse_max_students(fields["maxStudents"]).unwrap(
                "maxStudents"
            )
        for name in ("startDate", "endDate"):
            if name in fields:
                fields[name] = parse_timestamp(fields[name], name).unwrap(name)
        for name in ("startTime", "endTime"):
            if name in fields:
                fields[name] = parse_time_of_day(fields[name], name).unwrap(name)
        if "providerId" in fields:
            fields["providerId"] = parse_id(fields["providerId"], field="providerId")

        storage = to_storage_form(fields)
        unknown = sorted(set(storage) - WRITABLE_COLUMNS)
        if unknown:
            raise ValidationError(
                f"Unknown or read-only course field(s): {', '.join(unknown)}",
                details={"fields": unknown},
            )
        return storage

    async def list_courses(self) -> list[dict[str, Any]]:
        """
        Get all courses, most recently updated first.

        Returns:
            list[dict]: External-form courses

        Raises:
            PersistenceError: If the store query fails
        """
        async with store_operation(self.db, "list", "Failed to fetch courses."):
            courses = await course_crud.list_recent(self.db)
        return [serialize_course(c) for c in courses]

    async def get_course(self, course_id: str) -> dict[str, Any]:
        """
        Get course by ID with enrolled users resolved to public summaries.

        Args:
            course_id: Canonical course id

        Returns:
            dict: External-form course whose ``enrolled`` lists user summaries

        Raises:
            InvalidIdentifierError: If course_id is malformed
            CourseNotFoundError: If no course has this id
            PersistenceError: If the store query fails
        """
        cid = parse_id(course_id)

        async with store_operation(
            self.db, "get", "Failed to fetch course.", course_id=course_id
        ):
            course = await course_crud.get_by_id(self.db, cid)
            if course is None:
                raise CourseNotFoundError(course_id)

            enrolled_ids = [uuid.UUID(uid) for uid in course.enrolled if is_valid_id(uid)]
            rows = await user_crud.get_summaries(self.db, enrolled_ids)

        by_id = {str(row["id"]): to_external_form(row) for row in rows}
        result = serialize_course(course)
        result["enrolled"] = [by_id[uid] for uid in course.enrolled if uid in by_id]
        return result

    async def create_course(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        """
        Create new course with an empty enrollment list.

        Args:
            payload: External-form course fields

        Returns:
            dict: Created course in external form

        Raises:
            ValidationError: Missing title or uncoercible value
            InvalidIdentifierError: Malformed providerId
            PersistenceError: If the insert fails
        """
        storage = self.normalize_payload(payload, creating=True)
        storage["enrolled"] = []

        async with store_operation(self.db, "create", "Failed to save new course."):
            course = await course_crud.create(self.db, **storage)
            await self.db.commit()

        logger.info(
            "Course created",
            extra={"course_id": str(course.id), "course_title": course.title},
        )
        return serialize_course(course)

    async def update_course(
        self,
        course_id: str,
        payload: Mapping[str, Any],
    ) -> dict[str, Any]:
        """
        Apply a partial update to a course.

        Args:
            course_id: Canonical course id
            payload: External-form fields; absent or empty values are ignored

        Returns:
            dict: Updated course in external form

        Raises:
            ValidationError: Uncoercible value
            InvalidIdentifierError: Malformed course id or providerId
            CourseNotFoundError: If no course has this id
            PersistenceError: If the update fails
        """
        storage = self.normalize_payload(payload, creating=False)
        cid = parse_id(course_id)

        log_with_context(
            logger,
            logging.INFO,
            "Updating course",
            course_id=course_id,
            fields=sorted(storage),
        )

        async with store_operation(
            self.db,
            "update",
            "Failed to save updates to the course.",
            course_id=course_id,
        ):
            course = await course_crud.update_by_id(self.db, cid, **storage)
            if course is None:
                raise CourseNotFoundError(course_id)
            await self.db.commit()

        return serialize_course(course)

    async def delete_course(self, course_id: str) -> dict[str, Any]:
        """
        Delete course unconditionally; enrollments go with it.

        Args:
            course_id: Canonical course id

        Returns:
            dict: The deleted course in external form

        Raises:
            InvalidIdentifierError: If course_id is malformed
            CourseNotFoundError: If no course has this id
            PersistenceError: If the delete fails
        """
        cid = parse_id(course_id)

        async with store_operation(
            self.db, "delete", "Failed to delete course.", course_id=course_id
        ):
            course = await course_crud.delete_by_id(self.db, cid)
            if course is None:
                raise CourseNotFoundError(course_id)
            await self.db.commit()

        logger.info("Course deleted", extra={"course_id": course_id})
        return serialize_course(course)
