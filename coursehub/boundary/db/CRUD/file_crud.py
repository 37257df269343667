"""
File CRUD operations.

Provides Create, Read, Update, Delete operations for FileModel
with parent-based and featured lookups.

Dependencies: sqlalchemy, coursehub.boundary.db.models
System role: Document persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.boundary.db.models.file_model import FileModel
from coursehub.boundary.db.CRUD.base_crud import BaseCRUD
from coursehub.core.nodes import NodeKind


class FileCRUD(BaseCRUD[FileModel]):
    """CRUD operations for FileModel."""

    def __init__(self) -> None:
        """Initialize FileCRUD with FileModel."""
        super().__init__(FileModel)

    async def get_by_parent(
        self,
        session: AsyncSession,
        parent_kind: NodeKind,
        parent_id: UUID,
    ) -> Sequence[FileModel]:
        """Retrieve files whose parent pointer names the given node."""
        stmt = select(FileModel).where(
            FileModel.parent_kind == parent_kind,
            FileModel.parent_id == parent_id,
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_featured(
        self,
        session: AsyncSession,
        limit: int | None = None,
    ) -> Sequence[FileModel]:
        """
        Retrieve featured files, newest first.

        Args:
            session: Async database session
            limit: Maximum number of files to return

        Returns:
            Sequence of featured FileModels
        """
        stmt = (
            select(FileModel)
            .where(FileModel.is_featured.is_(True))
            .order_by(FileModel.created_at.desc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()


file_crud = FileCRUD()
