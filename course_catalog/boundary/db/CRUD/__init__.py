"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from course_catalog.boundary.db.CRUD import course_crud

    course = await course_crud.get_by_id(db, course_id)
"""

from course_catalog.boundary.db.CRUD.base_crud import BaseCRUD
from course_catalog.boundary.db.CRUD.course_crud import CourseCRUD, course_crud
from course_catalog.boundary.db.CRUD.user_crud import UserCRUD, user_crud

__all__ = [
    "BaseCRUD",
    "CourseCRUD",
    "course_crud",
    "UserCRUD",
    "user_crud",
]
