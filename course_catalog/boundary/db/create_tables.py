"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, course_catalog.configs
System role: Database schema initialization

Usage:
    python -m course_catalog.boundary.db.create_tables
"""

import asyncio
import logging

from course_catalog.boundary.db.base import Base
from course_catalog.boundary.db.connection import get_async_engine

# Import all models to register them with Base.metadata
from course_catalog.boundary.db.models import CourseModel, UserModel  # noqa: F401
from course_catalog.configs import get_settings
from course_catalog.observability.logger import configure_logging

logger = logging.getLogger(__name__)


async def create_all_tables() -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: uses CREATE TABLE IF NOT EXISTS semantics, so safe
    to run multiple times. Existing tables remain unchanged.

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("All tables created successfully")


async def drop_all_tables() -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.

    Raises:
        SQLAlchemyError: If database connection fails or drop fails
    """
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.info("All tables dropped successfully")


if __name__ == "__main__":
    configure_logging(get_settings().log_level)
    asyncio.run(create_all_tables())
