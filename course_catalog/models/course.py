"""
Course domain models and schemas.

Request/response schemas for course operations. Wire names are camelCase;
Python attribute names are snake_case.

Dependencies: pydantic
System role: Course API contracts
"""

import uuid
from datetime import datetime, time
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr
from pydantic.alias_generators import to_camel

from course_catalog.models.user import UserSummary


class CoursePayload(BaseModel):
    """
    Request schema shared by create and partial update.

    One optional slot per writable field. Numbers and dates are accepted in
    their raw wire types and coerced by the service. Numeric slots are strict,
    so JSON booleans are rejected instead of read as 0 or 1. Store-managed fields
    (id, enrolled, timestamps) and unknown keys are rejected.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    title: str | None = Field(None, max_length=255, description="Course title")
    provider_id: str | None = Field(None, description="Owning provider identifier")
    description: str | None = Field(None, description="Course description")
    short_description: str | None = Field(None, max_length=1024, description="Teaser text")
    level: str | None = Field(None, max_length=64, description="Difficulty level")
    price: StrictFloat | StrictInt | StrictStr | None = Field(
        None, description="Price, number or numeric string"
    )
    image_url: str | None = Field(None, max_length=2048, description="Cover image URL")
    max_students: StrictInt | StrictFloat | StrictStr | None = Field(
        None, description="Seat limit"
    )
    start_date: str | None = Field(None, description="ISO-8601 start timestamp")
    end_date: str | None = Field(None, description="ISO-8601 end timestamp")
    start_time: str | None = Field(None, description="Time of day, e.g. 09:30")
    end_time: str | None = Field(None, description="Time of day, e.g. 17:00")

    def to_external(self) -> dict[str, Any]:
        """Return the fields the caller actually sent, keyed by wire name."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class CourseResponse(BaseModel):
    """Response schema for course operations; absent fields are omitted."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: uuid.UUID
    title: str
    provider_id: uuid.UUID | None = None
    description: str | None = None
    short_description: str | None = None
    level: str | None = None
    price: float | None = None
    image_url: str | None = None
    max_students: int | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    start_time: time | None = None
    end_time: time | None = None
    enrolled: list[uuid.UUID] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CourseDetailResponse(CourseResponse):
    """Course with enrolled user ids resolved into public summaries."""

    enrolled: list[UserSummary] = Field(default_factory=list)  # type: ignore[assignment]


class EnrollmentStatusResponse(BaseModel):
    """Membership flag for the calling user."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    is_enrolled: bool
