"""
Test suite for schema creation helpers.

System role: Verification of table bootstrap script
"""

import pytest
from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from course_catalog.boundary.db import create_tables


@pytest.fixture
async def sqlite_engine(monkeypatch):
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    monkeypatch.setattr(create_tables, "get_async_engine", lambda: engine)
    yield engine
    await engine.dispose()


async def _table_names(engine) -> set[str]:
    async with engine.connect() as conn:
        return set(await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names()))


async def test_create_then_drop(sqlite_engine) -> None:
    await create_tables.create_all_tables()
    assert {"courses", "users"} <= await _table_names(sqlite_engine)

    await create_tables.create_all_tables()

    await create_tables.drop_all_tables()
    assert await _table_names(sqlite_engine) == set()
