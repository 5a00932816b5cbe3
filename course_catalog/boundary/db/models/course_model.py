"""
Course ORM model.

Represents a published course and the ordered list of users enrolled in it.

Dependencies: sqlalchemy, course_catalog.boundary.db.base
System role: Course persistence
"""

import uuid
from datetime import datetime, time

from sqlalchemy import JSON, DateTime, Float, Integer, String, Text, Time, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from course_catalog.boundary.db.base import Base, TimestampMixin, UUIDMixin

# Columns a course payload may write. Everything else is store-managed.
WRITABLE_COLUMNS = frozenset(
    {
        "title",
        "provider_id",
        "description",
        "short_description",
        "level",
        "price",
        "image_url",
        "max_students",
        "start_date",
        "end_date",
        "start_time",
        "end_time",
    }
)


class CourseModel(Base, UUIDMixin, TimestampMixin):
    """
    Course ORM model.

    ``enrolled`` holds user identifiers as canonical strings, in enrollment
    order. Uniqueness is enforced by the enrollment service, not the column.
    ``provider_id`` references a user owned by the auth subsystem and is not
    a foreign key.

    Attributes:
        id: UUID primary key (auto-generated)
        title: Course title (required)
        provider_id: Owning provider's user id (optional)
        description, short_description, level, image_url: Optional text
        price: Non-negative price
        max_students: Non-negative seat limit
        start_date, end_date: Course run timestamps (UTC)
        start_time, end_time: Daily session times
        enrolled: Enrolled user ids
        created_at, updated_at: Store-maintained timestamps (UTC)
    """

    __tablename__ = "courses"

    title: Mapped[str] = mapped_column(String(255), nullable=False, doc="Course title")
    provider_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        nullable=True,
        default=None,
        index=True,
        doc="Owning provider user id",
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    short_description: Mapped[str | None] = mapped_column(
        String(1024), nullable=True, default=None
    )
    level: Mapped[str | None] = mapped_column(String(64), nullable=True, default=None)
    price: Mapped[float | None] = mapped_column(Float, nullable=True, default=None)
    image_url: Mapped[str | None] = mapped_column(String(2048), nullable=True, default=None)
    max_students: Mapped[int | None] = mapped_column(Integer, nullable=True, default=None)
    start_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, default=None
    )
    end_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, default=None
    )
    start_time: Mapped[time | None] = mapped_column(Time, nullable=True, default=None)
    end_time: Mapped[time | None] = mapped_column(Time, nullable=True, default=None)
    enrolled: Mapped[list[str]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
        doc="Enrolled user ids in enrollment order",
    )

    def to_storage_dict(self) -> dict:
        """Column values keyed by storage (snake_case) name."""
        return {column.key: getattr(self, column.key) for column in self.__table__.columns}
