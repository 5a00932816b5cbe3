"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: course_catalog.configs, course_catalog.application, course_catalog.boundary
System role: DI container for service injection and caller identity
"""

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from course_catalog.application.services import (
    CourseService,
    EnrollmentService,
    ListingService,
)
from course_catalog.boundary.db import get_async_db
from course_catalog.configs import Settings, get_settings
from course_catalog.core.identifiers import is_valid_id
from course_catalog.models.user import CurrentUser


def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_course_service(
    db: AsyncSession = Depends(get_async_db),
    settings: Settings = Depends(get_settings_dependency),
) -> CourseService:
    """
    Get course service instance.

    Args:
        db: Async database session (injected via Depends)
        settings: Application settings (injected via Depends)

    Returns:
        CourseService: Course service instance
    """
    return CourseService(db=db, settings=settings.course)


def get_enrollment_service(db: AsyncSession = Depends(get_async_db)) -> EnrollmentService:
    """
    Get enrollment service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        EnrollmentService: Enrollment service instance
    """
    return EnrollmentService(db=db)


def get_listing_service(db: AsyncSession = Depends(get_async_db)) -> ListingService:
    """Get role-scoped listing service instance."""
    return ListingService(db=db)


def get_current_user(
    request: Request,
    settings: Settings = Depends(get_settings_dependency),
) -> CurrentUser:
    """
    Build the caller identity forwarded by the auth gateway.

    A missing or non-integer role is passed through as None; the listing
    service decides whether a role is acceptable.

    Args:
        request: Incoming request
        settings: Application settings (injected via Depends)

    Returns:
        CurrentUser: Caller id and role

    Raises:
        HTTPException(401): Missing or malformed user id header
    """
    user_id = request.headers.get(settings.auth.user_id_header)
    if not user_id or not is_valid_id(user_id):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")

    raw_role = request.headers.get(settings.auth.user_role_header)
    try:
        role = int(raw_role) if raw_role is not None else None
    except ValueError:
        role = None

    return CurrentUser(id=user_id, role=role)
