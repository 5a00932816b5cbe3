"""
Store failure translation shared by the services.

Dependencies: sqlalchemy, course_catalog.core.exceptions
System role: Maps driver exceptions to PersistenceError and releases the transaction
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from course_catalog.core.exceptions import PersistenceError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def store_operation(
    db: AsyncSession,
    operation: str,
    failure_message: str,
    **context: Any,
) -> AsyncIterator[None]:
    """
    Run a block of store calls as one unit.

    Any exception rolls the session back. SQLAlchemy errors are re-raised as
    PersistenceError carrying the driver message; domain errors pass through.

    Args:
        db: Request-scoped session
        operation: Short operation name for logs and error details
        failure_message: Message prefix for the PersistenceError
        **context: Extra log fields (course_id, user_id, ...)
    """
    try:
        yield
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(
            failure_message,
            extra={"operation": operation, "error": str(e), **context},
        )
        raise PersistenceError(failure_message, operation=operation, cause=e) from e
    except Exception:
        await db.rollback()
        raise
