"""Service orchestrators."""

from .course_service import CourseService
from .enrollment_service import EnrollmentService
from .listing_service import ListingService

__all__ = [
    "CourseService",
    "EnrollmentService",
    "ListingService",
]
