"""
API test fixtures.

Provides: fresh application, TestClient, mocked services, caller headers
System role: HTTP-layer test infrastructure
"""

import uuid
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from course_catalog.api.deps.dependencies import (
    get_course_service,
    get_enrollment_service,
    get_listing_service,
)
from course_catalog.api.main import create_app
from course_catalog.application.services import (
    CourseService,
    EnrollmentService,
    ListingService,
)


@pytest.fixture
def app():
    """Fresh application instance with no overrides."""
    application = create_app()
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def mock_course_service() -> MagicMock:
    service = MagicMock(spec=CourseService)
    for name in ("list_courses", "get_course", "create_course", "update_course", "delete_course"):
        setattr(service, name, AsyncMock())
    return service


@pytest.fixture
def mock_enrollment_service() -> MagicMock:
    service = MagicMock(spec=EnrollmentService)
    for name in ("enroll", "is_enrolled", "cancel_enrollment"):
        setattr(service, name, AsyncMock())
    return service


@pytest.fixture
def mock_listing_service() -> MagicMock:
    service = MagicMock(spec=ListingService)
    service.my_courses = AsyncMock()
    return service


@pytest.fixture
def client(app, mock_course_service, mock_enrollment_service, mock_listing_service) -> TestClient:
    """TestClient with every service replaced by a mock."""
    app.dependency_overrides[get_course_service] = lambda: mock_course_service
    app.dependency_overrides[get_enrollment_service] = lambda: mock_enrollment_service
    app.dependency_overrides[get_listing_service] = lambda: mock_listing_service
    return TestClient(app)


@pytest.fixture
def caller_id() -> uuid.UUID:
    return uuid.uuid4()


@pytest.fixture
def learner_headers(caller_id) -> dict[str, str]:
    return {"X-User-Id": str(caller_id), "X-User-Role": "0"}
