"""
Database models package.

Exports:
  - CourseModel: Course ORM model
  - UserModel: Read-side user ORM model

Dependencies: sqlalchemy, course_catalog.boundary.db.base
System role: Database model definitions for domain entities
"""

from course_catalog.boundary.db.models.course_model import CourseModel, WRITABLE_COLUMNS
from course_catalog.boundary.db.models.user_model import UserModel

__all__ = [
    "CourseModel",
    "UserModel",
    "WRITABLE_COLUMNS",
]
