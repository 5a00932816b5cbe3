"""
Test suite for the course HTTP endpoints.

Services are mocked; these tests check routing, status codes, error
bodies and wire naming.

System role: Verification of course API contract
"""

import uuid
from datetime import datetime, timezone

import pytest

from course_catalog.core.exceptions import (
    AlreadyEnrolledError,
    CourseNotFoundError,
    InvalidIdentifierError,
    InvalidRoleError,
    NotMemberError,
    PersistenceError,
    ValidationError,
)

API = "/api/v1/courses"


def course_dict(**overrides) -> dict:
    now = datetime(2024, 1, 1, tzinfo=timezone.utc)
    data = {
        "id": uuid.uuid4(),
        "title": "Python 101",
        "enrolled": [],
        "createdAt": now,
        "updatedAt": now,
    }
    data.update(overrides)
    return data


class TestListAndGet:
    def test_list_courses(self, client, mock_course_service) -> None:
        mock_course_service.list_courses.return_value = [
            course_dict(shortDescription="S", maxStudents=20)
        ]

        response = client.get(API)

        assert response.status_code == 200
        body = response.json()
        assert body[0]["shortDescription"] == "S"
        assert body[0]["maxStudents"] == 20
        assert "description" not in body[0]
        assert "short_description" not in body[0]

    def test_list_failure_is_500(self, client, mock_course_service) -> None:
        mock_course_service.list_courses.side_effect = PersistenceError(
            "Failed to fetch courses.", operation="list", cause=RuntimeError("down")
        )

        response = client.get(API)

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch courses. Error: down"}

    def test_get_course_with_summaries(self, client, mock_course_service) -> None:
        user_id = uuid.uuid4()
        mock_course_service.get_course.return_value = course_dict(
            enrolled=[{"id": user_id, "name": "Ada", "email": "ada@example.com", "role": 0}]
        )

        response = client.get(f"{API}/{uuid.uuid4()}")

        assert response.status_code == 200
        assert response.json()["enrolled"] == [
            {"id": str(user_id), "name": "Ada", "email": "ada@example.com", "role": 0}
        ]

    def test_get_malformed_id(self, client, mock_course_service) -> None:
        mock_course_service.get_course.side_effect = InvalidIdentifierError("abc")

        response = client.get(f"{API}/abc")

        assert response.status_code == 400
        assert response.json() == {"error": "abc is not a valid course id."}

    def test_get_missing(self, client, mock_course_service) -> None:
        course_id = str(uuid.uuid4())
        mock_course_service.get_course.side_effect = CourseNotFoundError(course_id)

        response = client.get(f"{API}/{course_id}")

        assert response.status_code == 404
        assert response.json() == {"error": f"Course with id {course_id} was not found."}


class TestCreateUpdateDelete:
    def test_create_passes_only_sent_fields(self, client, mock_course_service) -> None:
        mock_course_service.create_course.return_value = course_dict(price=19.99)

        response = client.post(API, json={"title": "Python 101", "price": "19.99"})

        assert response.status_code == 200
        assert response.json()["price"] == 19.99
        mock_course_service.create_course.assert_awaited_once_with(
            {"title": "Python 101", "price": "19.99"}
        )

    def test_create_validation_error(self, client, mock_course_service) -> None:
        mock_course_service.create_course.side_effect = ValidationError(
            "Course must have a title.", field="title"
        )

        response = client.post(API, json={})

        assert response.status_code == 400
        assert response.json() == {"error": "Course must have a title."}

    @pytest.mark.parametrize("body", [{"title": "T", "enrolled": []}, {"title": "T", "id": "x"}])
    def test_create_rejects_unknown_or_read_only_keys(
        self, client, mock_course_service, body
    ) -> None:
        response = client.post(API, json=body)

        assert response.status_code == 400
        assert response.json()["error"].startswith("Invalid request: ")
        mock_course_service.create_course.assert_not_called()

    @pytest.mark.parametrize(
        "body",
        [
            {"title": "T", "price": True},
            {"title": "T", "maxStudents": True},
            {"title": "T", "maxStudents": False, "price": False},
        ],
    )
    def test_create_rejects_boolean_numbers(self, client, mock_course_service, body) -> None:
        response = client.post(API, json=body)

        assert response.status_code == 400
        assert response.json()["error"].startswith("Invalid request: ")
        mock_course_service.create_course.assert_not_called()

    def test_update_rejects_boolean_price(self, client, mock_course_service) -> None:
        response = client.patch(f"{API}/{uuid.uuid4()}", json={"price": True})

        assert response.status_code == 400
        mock_course_service.update_course.assert_not_called()

    def test_update_partial(self, client, mock_course_service) -> None:
        course_id = str(uuid.uuid4())
        mock_course_service.update_course.return_value = course_dict(level="advanced")

        response = client.patch(f"{API}/{course_id}", json={"level": "advanced"})

        assert response.status_code == 200
        assert response.json()["level"] == "advanced"
        mock_course_service.update_course.assert_awaited_once_with(
            course_id, {"level": "advanced"}
        )

    def test_update_missing(self, client, mock_course_service) -> None:
        course_id = str(uuid.uuid4())
        mock_course_service.update_course.side_effect = CourseNotFoundError(course_id)

        response = client.patch(f"{API}/{course_id}", json={"title": "x"})

        assert response.status_code == 404

    def test_delete_returns_deleted_course(self, client, mock_course_service) -> None:
        deleted = course_dict(title="Gone")
        mock_course_service.delete_course.return_value = deleted

        response = client.delete(f"{API}/{deleted['id']}")

        assert response.status_code == 200
        assert response.json()["title"] == "Gone"

    def test_unexpected_error_is_generic_500(self, client, mock_course_service) -> None:
        mock_course_service.delete_course.side_effect = RuntimeError("secret detail")

        response = client.delete(f"{API}/{uuid.uuid4()}")

        assert response.status_code == 500
        assert "secret detail" not in response.json()["error"]


class TestEnrollmentEndpoints:
    def test_enroll(self, client, mock_enrollment_service, learner_headers, caller_id) -> None:
        course_id = str(uuid.uuid4())

        response = client.post(f"{API}/{course_id}/enroll", headers=learner_headers)

        assert response.status_code == 200
        assert response.json() == {"message": "Successfully enrolled"}
        mock_enrollment_service.enroll.assert_awaited_once_with(course_id, caller_id)

    def test_enroll_twice(self, client, mock_enrollment_service, learner_headers) -> None:
        mock_enrollment_service.enroll.side_effect = AlreadyEnrolledError("c", "u")

        response = client.post(f"{API}/{uuid.uuid4()}/enroll", headers=learner_headers)

        assert response.status_code == 400
        assert response.json() == {"error": "You have already enrolled in this course"}

    def test_enroll_requires_identity(self, client, mock_enrollment_service) -> None:
        response = client.post(f"{API}/{uuid.uuid4()}/enroll")

        assert response.status_code == 401
        assert response.json() == {"error": "Not authenticated"}
        mock_enrollment_service.enroll.assert_not_called()

    def test_enroll_rejects_malformed_caller_id(self, client) -> None:
        response = client.post(
            f"{API}/{uuid.uuid4()}/enroll", headers={"X-User-Id": "not-a-uuid"}
        )
        assert response.status_code == 401

    def test_is_enrolled(self, client, mock_enrollment_service, learner_headers) -> None:
        mock_enrollment_service.is_enrolled.return_value = True

        response = client.get(f"{API}/{uuid.uuid4()}/enroll", headers=learner_headers)

        assert response.status_code == 200
        assert response.json() == {"isEnrolled": True}

    def test_cancel(self, client, mock_enrollment_service, learner_headers) -> None:
        response = client.delete(f"{API}/{uuid.uuid4()}/enroll", headers=learner_headers)

        assert response.status_code == 200
        assert response.json() == {"message": "Successfully cancelled enrollment."}

    def test_cancel_not_member(self, client, mock_enrollment_service, learner_headers) -> None:
        mock_enrollment_service.cancel_enrollment.side_effect = NotMemberError("c", "u")

        response = client.delete(f"{API}/{uuid.uuid4()}/enroll", headers=learner_headers)

        assert response.status_code == 400
        assert response.json() == {"error": "User is not enrolled to this course"}


class TestMyCourses:
    def test_mine_is_not_treated_as_course_id(
        self, client, mock_listing_service, mock_course_service, learner_headers, caller_id
    ) -> None:
        mock_listing_service.my_courses.return_value = [course_dict(title="Mine")]

        response = client.get(f"{API}/mine", headers=learner_headers)

        assert response.status_code == 200
        assert [c["title"] for c in response.json()] == ["Mine"]
        user = mock_listing_service.my_courses.await_args.args[0]
        assert user.id == caller_id and user.role == 0
        mock_course_service.get_course.assert_not_called()

    def test_mine_with_unparseable_role(self, client, mock_listing_service, caller_id) -> None:
        mock_listing_service.my_courses.side_effect = InvalidRoleError(None)

        response = client.get(
            f"{API}/mine", headers={"X-User-Id": str(caller_id), "X-User-Role": "admin"}
        )

        assert response.status_code == 400
        assert response.json() == {"error": "User role is not specified or invalid: None"}
        assert mock_listing_service.my_courses.await_args.args[0].role is None
