"""
Course response mapping utilities.

Transforms external-form course dictionaries into Pydantic response models.

Dependencies: course_catalog.models.course
System role: Course response transformation
"""

from typing import Any

from course_catalog.models.course import CourseDetailResponse, CourseResponse


def map_course_to_response(course_data: dict[str, Any]) -> CourseResponse:
    """
    Transform an external-form course into CourseResponse.

    Args:
        course_data: camelCase course mapping from the service layer

    Returns:
        CourseResponse: Pydantic model for API response
    """
    return CourseResponse(**course_data)


def map_courses_to_response(courses_data: list[dict[str, Any]]) -> list[CourseResponse]:
    """Transform a list of external-form courses."""
    return [map_course_to_response(course) for course in courses_data]


def map_course_detail_to_response(course_data: dict[str, Any]) -> CourseDetailResponse:
    """
    Transform a course whose enrolled list holds user summaries.

    Args:
        course_data: camelCase course mapping with resolved ``enrolled``

    Returns:
        CourseDetailResponse: Pydantic model for API response
    """
    return CourseDetailResponse(**course_data)
