"""
User ORM model.

Users are created and authenticated by the auth subsystem. This service
only reads them to resolve course enrollments into public summaries.

Dependencies: sqlalchemy, course_catalog.boundary.db.base
System role: Read-side view of the users table
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from course_catalog.boundary.db.base import Base, TimestampMixin, UUIDMixin


class UserModel(Base, UUIDMixin, TimestampMixin):
    """
    User ORM model.

    Attributes:
        id: UUID primary key
        name: Display name
        email: Login email
        role: 0 = learner, 1 = provider
        password_hash: Credential hash (never exposed)
    """

    __tablename__ = "users"

    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True)
    role: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
