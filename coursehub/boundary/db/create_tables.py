"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, coursehub.configs
System role: Database schema initialization

Usage:
    python -m coursehub.boundary.db.create_tables
"""

import asyncio
import logging

from coursehub.boundary.db.base import Base
from coursehub.boundary.db.connection import get_async_engine
from coursehub.observability.logger import configure_logging

# Import all models to register them with Base.metadata
from coursehub.boundary.db.models import (  # noqa: F401
    CourseModel,
    FavoriteModel,
    FileModel,
    FolderModel,
    ReviewModel,
)

logger = logging.getLogger(__name__)


async def create_all_tables() -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: calls CREATE TABLE IF NOT EXISTS for each model, so safe
    to run multiple times. Existing tables remain unchanged.

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("All tables created", extra={"tables": sorted(Base.metadata.tables)})


async def drop_all_tables() -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.
    """
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.warning("All tables dropped")


if __name__ == "__main__":
    configure_logging()
    asyncio.run(create_all_tables())
