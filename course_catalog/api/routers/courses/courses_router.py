"""
Course API endpoints.

Routes:
- GET /courses - List all courses, most recently updated first
- GET /courses/mine - Courses visible to the caller's role
- GET /courses/{id} - Get single course with enrolled users resolved
- POST /courses - Create new course
- PATCH /courses/{id} - Partially update course
- DELETE /courses/{id} - Delete course
- POST /courses/{id}/enroll - Enroll caller
- GET /courses/{id}/enroll - Is caller enrolled
- DELETE /courses/{id}/enroll - Cancel caller's enrollment

Course ids are taken as plain strings so malformed ids get the domain
"not a valid course id" error instead of a framework validation message.

Dependencies: course_catalog.application.services, course_catalog.models
System role: Course management HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from course_catalog.api.deps.dependencies import (
    get_course_service,
    get_current_user,
    get_enrollment_service,
    get_listing_service,
)
from course_catalog.application.services import (
    CourseService,
    EnrollmentService,
    ListingService,
)
from course_catalog.models.common import ErrorResponse, MessageResponse
from course_catalog.models.course import (
    CourseDetailResponse,
    CoursePayload,
    CourseResponse,
    EnrollmentStatusResponse,
)
from course_catalog.models.user import CurrentUser

from .course_error_handling import handle_course_errors
from .course_responses import (
    map_course_detail_to_response,
    map_course_to_response,
    map_courses_to_response,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/courses", tags=["courses"])

ERRORS_400 = {400: {"model": ErrorResponse}}
ERRORS_400_404 = {400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}


@router.get("", response_model=list[CourseResponse], response_model_exclude_none=True)
@handle_course_errors
async def list_courses(
    course_service: CourseService = Depends(get_course_service),
) -> list[CourseResponse]:
    """
    List all courses, most recently updated first.

    Returns:
        list[CourseResponse]: All courses

    Raises:
        HTTPException(500): Retrieval failed
    """
    courses = await course_service.list_courses()

    logger.info("Courses retrieved successfully", extra={"count": len(courses)})

    return map_courses_to_response(courses)


@router.get(
    "/mine",
    response_model=list[CourseResponse],
    response_model_exclude_none=True,
    responses=ERRORS_400,
)
@handle_course_errors
async def my_courses(
    current_user: CurrentUser = Depends(get_current_user),
    listing_service: ListingService = Depends(get_listing_service),
) -> list[CourseResponse]:
    """
    List the caller's courses: enrolled ones for learners, owned ones for providers.

    Raises:
        HTTPException(400): Role missing or unrecognized
        HTTPException(401): Caller not authenticated
    """
    courses = await listing_service.my_courses(current_user)
    return map_courses_to_response(courses)


@router.get(
    "/{course_id}",
    response_model=CourseDetailResponse,
    response_model_exclude_none=True,
    responses=ERRORS_400_404,
)
@handle_course_errors
async def get_course(
    course_id: str,
    course_service: CourseService = Depends(get_course_service),
) -> CourseDetailResponse:
    """
    Get single course by ID with enrolled users resolved to public summaries.

    Raises:
        HTTPException(400): Malformed id
        HTTPException(404): Course not found
    """
    course_data = await course_service.get_course(course_id)
    return map_course_detail_to_response(course_data)


@router.post(
    "",
    response_model=CourseResponse,
    response_model_exclude_none=True,
    responses=ERRORS_400,
)
@handle_course_errors
async def create_course(
    request: CoursePayload,
    course_service: CourseService = Depends(get_course_service),
) -> CourseResponse:
    """
    Create new course with an empty enrollment list.

    Raises:
        HTTPException(400): Missing title, bad type or bad providerId
        HTTPException(500): Creation failed
    """
    logger.info(
        "Creating new course",
        extra={"course_title": request.title, "has_provider": bool(request.provider_id)},
    )

    course_data = await course_service.create_course(request.to_external())

    logger.info(
        "Course created successfully",
        extra={"course_id": str(course_data["id"])},
    )

    return map_course_to_response(course_data)


@router.patch(
    "/{course_id}",
    response_model=CourseResponse,
    response_model_exclude_none=True,
    responses=ERRORS_400_404,
)
@handle_course_errors
async def update_course(
    course_id: str,
    request: CoursePayload,
    course_service: CourseService = Depends(get_course_service),
) -> CourseResponse:
    """
    Apply the provided, non-empty fields to a course.

    Raises:
        HTTPException(400): Bad input or id
        HTTPException(404): Course not found
        HTTPException(500): Update failed
    """
    course_data = await course_service.update_course(course_id, request.to_external())
    return map_course_to_response(course_data)


@router.delete(
    "/{course_id}",
    response_model=CourseResponse,
    response_model_exclude_none=True,
    responses=ERRORS_400_404,
)
@handle_course_errors
async def delete_course(
    course_id: str,
    course_service: CourseService = Depends(get_course_service),
) -> CourseResponse:
    """
    Delete course by ID and return the deleted record.

    Raises:
        HTTPException(400): Malformed id
        HTTPException(404): Course not found
    """
    course_data = await course_service.delete_course(course_id)
    return map_course_to_response(course_data)


@router.post("/{course_id}/enroll", response_model=MessageResponse, responses=ERRORS_400_404)
@handle_course_errors
async def enroll(
    course_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
) -> MessageResponse:
    """
    Enroll the caller in a course.

    Raises:
        HTTPException(400): Already enrolled or malformed id
        HTTPException(404): Course not found
    """
    await enrollment_service.enroll(course_id, current_user.id)
    return MessageResponse(message="Successfully enrolled")


@router.get(
    "/{course_id}/enroll",
    response_model=EnrollmentStatusResponse,
    responses=ERRORS_400_404,
)
@handle_course_errors
async def is_enrolled(
    course_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
) -> EnrollmentStatusResponse:
    """
    Report whether the caller is enrolled in a course.

    Raises:
        HTTPException(400): Malformed id
        HTTPException(404): Course not found
    """
    flag = await enrollment_service.is_enrolled(course_id, current_user.id)
    return EnrollmentStatusResponse(is_enrolled=flag)


@router.delete("/{course_id}/enroll", response_model=MessageResponse, responses=ERRORS_400_404)
@handle_course_errors
async def cancel_enrollment(
    course_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
) -> MessageResponse:
    """
    Cancel the caller's enrollment in a course.

    Raises:
        HTTPException(400): Not enrolled or malformed id
        HTTPException(404): Course not found
    """
    await enrollment_service.cancel_enrollment(course_id, current_user.id)
    return MessageResponse(message="Successfully cancelled enrollment.")
