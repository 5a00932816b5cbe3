"""
Test suite for UserCRUD public projections.

System role: Verification that enrollment resolution never exposes credentials
"""

import uuid

from course_catalog.boundary.db.CRUD.user_crud import user_crud


class TestGetSummaries:
    """Test suite for UserCRUD.get_summaries()."""

    async def test_returns_public_fields_only(self, test_async_db, make_user) -> None:
        user = await make_user(name="Ada", email="ada@example.com", role=0)

        rows = await user_crud.get_summaries(test_async_db, [user.id])

        assert rows == [{"id": user.id, "name": "Ada", "email": "ada@example.com", "role": 0}]
        assert "password_hash" not in rows[0]
        assert "created_at" not in rows[0]

    async def test_unknown_ids_are_skipped(self, test_async_db, make_user) -> None:
        user = await make_user()

        rows = await user_crud.get_summaries(test_async_db, [user.id, uuid.uuid4()])

        assert [row["id"] for row in rows] == [user.id]

    async def test_empty_input_skips_query(self, test_async_db) -> None:
        assert await user_crud.get_summaries(test_async_db, []) == []
