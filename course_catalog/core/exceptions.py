"""
Exception hierarchy for the course catalog.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and an HTTP status
the API layer maps them to.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class CourseCatalogError(Exception):
    """Base exception for all course catalog errors."""

    status_code: int = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InvalidIdentifierError(CourseCatalogError):
    """Raised when a supplied identifier is not a canonical record id."""

    status_code = 400

    def __init__(
        self,
        value: Any,
        field: str = "id",
        message: str | None = None,
    ) -> None:
        """
        Initialize invalid identifier error.

        Args:
            value: The rejected raw value
            field: Name of the identifier-bearing field
            message: Override for the default message
        """
        if message is None:
            if field == "id":
                message = f"{value} is not a valid course id."
            else:
                message = f"{value} is not valid value for {field}."
        super().__init__(message, {"field": field, "value": str(value)})


class ValidationError(CourseCatalogError):
    """Raised when input validation fails."""

    status_code = 400

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class CourseNotFoundError(CourseCatalogError):
    """Raised when an operation targets a nonexistent course."""

    status_code = 404

    def __init__(self, course_id: Any, message: str | None = None) -> None:
        super().__init__(
            message or f"Course with id {course_id} was not found.",
            {"course_id": str(course_id)},
        )


class EnrollmentError(CourseCatalogError):
    """Base exception for enrollment state-machine misuse."""

    status_code = 400

    def __init__(self, message: str, course_id: Any, user_id: Any) -> None:
        super().__init__(
            message,
            {"course_id": str(course_id), "user_id": str(user_id)},
        )


class AlreadyEnrolledError(EnrollmentError):
    """Raised when a user enrolls in a course they are already enrolled in."""

    def __init__(self, course_id: Any, user_id: Any) -> None:
        super().__init__("You have already enrolled in this course", course_id, user_id)


class NotMemberError(EnrollmentError):
    """Raised when cancelling an enrollment that does not exist."""

    def __init__(self, course_id: Any, user_id: Any) -> None:
        super().__init__("User is not enrolled to this course", course_id, user_id)


class InvalidRoleError(CourseCatalogError):
    """Raised when the caller's role is missing or unrecognized."""

    status_code = 400

    def __init__(self, role: Any) -> None:
        super().__init__(
            f"User role is not specified or invalid: {role}",
            {"role": str(role)},
        )


class PersistenceError(CourseCatalogError):
    """Raised when a store operation fails for reasons opaque to the domain."""

    status_code = 500

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        """
        Initialize persistence error.

        Args:
            message: Summary of the failed operation
            operation: Store operation that failed (create, update, ...)
            cause: Underlying driver exception; its message is forwarded verbatim
        """
        details: dict[str, Any] = {}
        if operation:
            details["operation"] = operation
        if cause is not None:
            message = f"{message} Error: {cause}"
            details["error_type"] = type(cause).__name__
        super().__init__(message, details)
