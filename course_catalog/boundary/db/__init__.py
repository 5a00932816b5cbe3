"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Connection management
  - CourseModel, UserModel: Domain entities
  - course_crud, user_crud: CRUD operation singletons

Dependencies: sqlalchemy, course_catalog.configs
System role: Database adapter providing persistent storage for courses
"""

from course_catalog.boundary.db.base import Base, TimestampMixin, UUIDMixin
from course_catalog.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from course_catalog.boundary.db.models import CourseModel, UserModel
from course_catalog.boundary.db.CRUD import (
    BaseCRUD,
    CourseCRUD,
    UserCRUD,
    course_crud,
    user_crud,
)

__all__ = [
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    "CourseModel",
    "UserModel",
    "BaseCRUD",
    "CourseCRUD",
    "UserCRUD",
    "course_crud",
    "user_crud",
]
