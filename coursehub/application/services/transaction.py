"""
Unit-of-work helper.

Commits the session when the block succeeds and rolls it back otherwise,
translating store failures into retryable DependencyErrors.

Dependencies: sqlalchemy, coursehub.core.exceptions
System role: Transaction boundary shared by all mutating services
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.core.exceptions import ConflictError, CourseHubException, DependencyError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def unit_of_work(
    db: AsyncSession,
    operation: str,
    conflict_message: str | None = None,
) -> AsyncIterator[AsyncSession]:
    """
    Run a block as one transaction.

    Args:
        db: Async database session
        operation: Name used in logs and error details
        conflict_message: If set, unique-constraint violations become
            ConflictError with this message instead of DependencyError

    Yields:
        AsyncSession: The same session, for convenience

    Raises:
        CourseHubException: Domain errors raised inside the block, after rollback
        ConflictError: On integrity violations when conflict_message is set
        DependencyError: On any other store failure (retryable)
    """
    try:
        yield db
        await db.commit()
    except CourseHubException:
        await db.rollback()
        raise
    except IntegrityError as e:
        await db.rollback()
        if conflict_message is not None:
            raise ConflictError(conflict_message, {"operation": operation}) from e
        raise DependencyError(
            f"Integrity failure during {operation}",
            operation=operation,
            retryable=False,
            details={"error": str(e.orig)},
        ) from e
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(
            "Store failure, transaction rolled back",
            extra={"operation": operation, "error": str(e)},
        )
        raise DependencyError(
            f"Backing store failed during {operation}",
            operation=operation,
            details={"error": str(e)},
        ) from e
