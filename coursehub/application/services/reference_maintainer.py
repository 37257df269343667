"""
Reference consistency maintainer.

Keeps a parent's child lists and a child's parent pointer in agreement.
Both operations only flush; the caller's transaction commits them together
with the record writes they accompany.

Dependencies: sqlalchemy, coursehub.boundary.db
System role: Back-reference symmetry for the Course → Folder → File tree
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.boundary.db.CRUD import node_crud
from coursehub.boundary.db.models import CourseModel, FileModel, FolderModel
from coursehub.core.exceptions import ConflictError
from coursehub.core.nodes import NodeKind

logger = logging.getLogger(__name__)

ParentNode = CourseModel | FolderModel
ChildNode = FolderModel | FileModel

# (parent kind, child kind) -> attribute holding the child's ID
CHILD_LIST_FIELDS: dict[tuple[NodeKind, NodeKind], str] = {
    (NodeKind.COURSE, NodeKind.FOLDER): "folder_ids",
    (NodeKind.COURSE, NodeKind.FILE): "file_ids",
    (NodeKind.FOLDER, NodeKind.FOLDER): "subfolder_ids",
    (NodeKind.FOLDER, NodeKind.FILE): "file_ids",
}


def child_list_field(parent_kind: NodeKind, child_kind: NodeKind) -> str:
    """Name of the list on parent_kind that holds children of child_kind."""
    return CHILD_LIST_FIELDS[(parent_kind, child_kind)]


def child_ids(node: ParentNode) -> tuple[list[str], list[str]]:
    """Return (folder IDs, file IDs) of a Course or Folder, in order."""
    folders = getattr(node, child_list_field(node.node_kind, NodeKind.FOLDER))
    return list(folders), list(node.file_ids)


class ReferenceMaintainer:
    """Attach and detach children while keeping both sides of the edge in step."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize maintainer with async database session.

        Args:
            db: Async SQLAlchemy session shared with the calling operation
        """
        self.db = db

    async def attach(self, child: ChildNode, parent: ParentNode) -> None:
        """
        Make parent own child.

        Sets the child's parent pointer and appends its ID to the matching
        child list of the parent (once). The parent row should already be
        locked by the caller.

        A recorded parent only blocks the attach while it still exists and
        still lists the child. A stale pointer (parent gone, or the entry
        already detached as during a move) is overwritten.

        Args:
            child: Folder or File record
            parent: Course or Folder record

        Raises:
            ConflictError: If another live parent still lists the child
        """
        target = (parent.node_kind, parent.id)
        recorded = (child.parent_kind, child.parent_id)
        if child.parent_id is not None and recorded != target:
            current = await node_crud(child.parent_kind).get_by_id(
                self.db, child.parent_id, for_update=True
            )
            field = child_list_field(child.parent_kind, child.node_kind)
            if current is not None and str(child.id) in getattr(current, field):
                raise ConflictError(
                    f"{child.node_kind.value} already belongs to another parent",
                    {
                        "child_id": str(child.id),
                        "current_parent_id": str(child.parent_id),
                        "requested_parent_id": str(parent.id),
                    },
                )

        child.parent_kind, child.parent_id = target
        field = child_list_field(parent.node_kind, child.node_kind)
        ids = list(getattr(parent, field))
        if str(child.id) not in ids:
            ids.append(str(child.id))
            setattr(parent, field, ids)
        await self.db.flush()

    async def detach(self, child: ChildNode) -> bool:
        """
        Remove child from its recorded parent's child list.

        Idempotent: a missing parent or an absent entry is a no-op.

        Args:
            child: Folder or File record

        Returns:
            bool: True if an entry was removed
        """
        parent = await node_crud(child.parent_kind).get_by_id(
            self.db, child.parent_id, for_update=True
        )
        if parent is None:
            logger.debug(
                "Detach skipped, parent gone",
                extra={"child_id": str(child.id), "parent_id": str(child.parent_id)},
            )
            return False

        field = child_list_field(parent.node_kind, child.node_kind)
        ids = getattr(parent, field)
        if str(child.id) not in ids:
            return False

        setattr(parent, field, [i for i in ids if i != str(child.id)])
        await self.db.flush()
        return True
