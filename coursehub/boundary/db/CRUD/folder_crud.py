"""
Folder CRUD operations.

Provides Create, Read, Update, Delete operations for FolderModel
with parent-based lookups.

Dependencies: sqlalchemy, coursehub.boundary.db.models
System role: Folder persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.boundary.db.models.folder_model import FolderModel
from coursehub.boundary.db.CRUD.base_crud import BaseCRUD
from coursehub.core.nodes import NodeKind


class FolderCRUD(BaseCRUD[FolderModel]):
    """CRUD operations for FolderModel."""

    def __init__(self) -> None:
        """Initialize FolderCRUD with FolderModel."""
        super().__init__(FolderModel)

    async def get_by_parent(
        self,
        session: AsyncSession,
        parent_kind: NodeKind,
        parent_id: UUID,
    ) -> Sequence[FolderModel]:
        """
        Retrieve folders whose parent pointer names the given node.

        Used by integrity checks; listing goes through the parent's
        ordered child list instead.
        """
        stmt = select(FolderModel).where(
            FolderModel.parent_kind == parent_kind,
            FolderModel.parent_id == parent_id,
        )
        result = await session.execute(stmt)
        return result.scalars().all()


folder_crud = FolderCRUD()
