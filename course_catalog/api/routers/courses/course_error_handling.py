"""
Course error handling utilities.

Provides a decorator for consistent error handling across course-related
API endpoints: domain errors are logged with context and converted into
HTTPExceptions carrying the status each error class declares.

Dependencies: fastapi, course_catalog.core.exceptions
System role: Domain error → HTTP mapping for course routes
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from course_catalog.core.exceptions import CourseCatalogError

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_course_errors(func: F) -> F:
    """
    Decorator to handle course-related errors and transform them into HTTPExceptions.

    This centralizes:
    - Logging of errors with context (course_id, user_id, field)
    - Mapping domain exceptions to HTTP status codes
    - Ensuring uniform error messages (rendered as ``{error}`` by the app)
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except CourseCatalogError as e:
            if e.status_code >= 500:
                logger.error(
                    "Course operation failed",
                    extra={"error_type": type(e).__name__, "error": e.message, **e.details},
                )
            else:
                logger.warning(
                    "Rejected course request",
                    extra={"error_type": type(e).__name__, "error": e.message, **e.details},
                )
            raise HTTPException(status_code=e.status_code, detail=e.message)

        except Exception as e:
            logger.exception(
                "Unexpected failure in course operation",
                extra={"error": str(e)}
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="An internal error occurred during course operation."
            )

    return wrapper  # type: ignore
