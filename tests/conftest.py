"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory async database, row factories, caller identities
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import uuid
from typing import Any, Awaitable, Callable

import pytest


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
    from sqlalchemy.pool import StaticPool

    from course_catalog.boundary.db.base import Base
    from course_catalog.boundary.db.models import CourseModel, UserModel  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def make_course(test_async_db) -> Callable[..., Awaitable[Any]]:
    """
    Factory inserting a course row directly through the ORM.

    Returns:
        Callable: ``await make_course(title=..., enrolled=[...], ...)``
    """
    from course_catalog.boundary.db.models import CourseModel

    async def _make(**fields: Any) -> CourseModel:
        fields.setdefault("title", "Intro to Testing")
        fields.setdefault("enrolled", [])
        course = CourseModel(**fields)
        test_async_db.add(course)
        await test_async_db.commit()
        await test_async_db.refresh(course)
        return course

    return _make


@pytest.fixture
def make_user(test_async_db) -> Callable[..., Awaitable[Any]]:
    """
    Factory inserting a user row (normally owned by the auth subsystem).

    Returns:
        Callable: ``await make_user(name=..., role=...)``
    """
    from course_catalog.boundary.db.models import UserModel

    async def _make(**fields: Any) -> UserModel:
        fields.setdefault("name", "Test User")
        fields.setdefault("email", f"{uuid.uuid4().hex[:8]}@example.com")
        fields.setdefault("role", 0)
        fields.setdefault("password_hash", "not-a-real-hash")
        user = UserModel(**fields)
        test_async_db.add(user)
        await test_async_db.commit()
        await test_async_db.refresh(user)
        return user

    return _make


@pytest.fixture
def learner_id() -> uuid.UUID:
    """Generate a learner user ID."""
    return uuid.uuid4()


@pytest.fixture
def provider_id() -> uuid.UUID:
    """Generate a provider user ID."""
    return uuid.uuid4()
