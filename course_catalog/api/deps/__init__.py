"""API-specific dependencies."""

from .dependencies import (
    get_course_service,
    get_current_user,
    get_enrollment_service,
    get_listing_service,
    get_settings_dependency,
)

__all__ = [
    "get_course_service",
    "get_current_user",
    "get_enrollment_service",
    "get_listing_service",
    "get_settings_dependency",
]
