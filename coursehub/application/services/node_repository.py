"""
Node repository.

Typed storage and lookup for Courses, Folders and Files. Every mutating
call validates its input before touching the store and runs as a single
transaction together with the reference bookkeeping it requires.

Dependencies: sqlalchemy, coursehub.boundary.db, coursehub.core
System role: The only component that reads and writes node records
"""

import logging
from typing import Any, Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.application.services.reference_maintainer import (
    ReferenceMaintainer,
    child_ids,
)
from coursehub.application.services.transaction import unit_of_work
from coursehub.boundary.db.CRUD import course_crud, file_crud, folder_crud, node_crud
from coursehub.boundary.db.models import CourseModel, FileModel, FolderModel
from coursehub.core.exceptions import NotFoundError, ValidationError
from coursehub.core.nodes import NodeKind, NodeRef, ParentRef, parent_from_fields
from coursehub.core.validation import (
    DESCRIPTION_MAX_LENGTH,
    clean_flag,
    clean_name,
    clean_optional_text,
    reject_unknown_fields,
)

logger = logging.getLogger(__name__)

Node = CourseModel | FolderModel | FileModel

UPDATABLE_FIELDS: dict[NodeKind, set[str]] = {
    NodeKind.COURSE: {"name", "description", "is_featured"},
    NodeKind.FOLDER: {"name"},
    NodeKind.FILE: {"name", "is_featured"},
}


def _require_uuid(fields: dict[str, Any], name: str) -> UUID:
    value = fields.get(name)
    if not isinstance(value, UUID):
        raise ValidationError(f"{name} is required", field=name)
    return value


def _require_text(fields: dict[str, Any], name: str, max_length: int = 1024) -> str:
    value = clean_optional_text(fields.get(name), name, max_length)
    if not value:
        raise ValidationError(f"{name} is required", field=name)
    return value


class NodeRepository:
    """Repository for the three node kinds of the hierarchy."""

    def __init__(
        self,
        db: AsyncSession,
        maintainer: ReferenceMaintainer | None = None,
    ) -> None:
        """
        Initialize repository with async database session.

        Args:
            db: Async SQLAlchemy session
            maintainer: ReferenceMaintainer sharing the session (created if None)
        """
        self.db = db
        self.maintainer = maintainer or ReferenceMaintainer(db)

    async def find(
        self,
        kind: NodeKind,
        node_id: UUID,
        for_update: bool = False,
    ) -> Node | None:
        """Return the node, or None if it does not exist."""
        return await node_crud(kind).get_by_id(self.db, node_id, for_update=for_update)

    async def get(
        self,
        kind: NodeKind,
        node_id: UUID,
        for_update: bool = False,
    ) -> Node:
        """
        Return the node.

        Raises:
            NotFoundError: If it does not exist
        """
        node = await self.find(kind, node_id, for_update=for_update)
        if node is None:
            raise NotFoundError(kind.value, node_id)
        return node

    async def create(self, kind: NodeKind, fields: dict[str, Any]) -> Node:
        """
        Validate and create a node, attaching it to its parent.

        Accepted fields:
            Course: name, description, is_featured, admin_id
            Folder: name, course_id | parent_folder_id, uploader_id
            File: name, url, blob_key, course_id | parent_folder_id,
                uploader_id, is_featured

        Args:
            kind: Kind of node to create
            fields: Field values as listed above

        Returns:
            Node: The committed record

        Raises:
            ValidationError: On malformed input (nothing written)
            NotFoundError: If the parent does not exist (nothing written)
            DependencyError: If the store fails (rolled back)
        """
        values, parent_ref = self._validate_create(kind, fields)

        async with unit_of_work(self.db, f"create_{kind.value.lower()}"):
            if parent_ref is None:
                node = await course_crud.create(self.db, **values)
            else:
                parent = await self.get(parent_ref.kind, parent_ref.id, for_update=True)
                node = await node_crud(kind).create(
                    self.db,
                    parent_kind=parent_ref.kind,
                    parent_id=parent_ref.id,
                    **values,
                )
                await self.maintainer.attach(node, parent)

        logger.info(
            f"{kind.value} created",
            extra={
                "node_id": str(node.id),
                "parent_id": str(parent_ref.id) if parent_ref else None,
            },
        )
        return node

    async def update_fields(
        self,
        kind: NodeKind,
        node_id: UUID,
        fields: dict[str, Any],
    ) -> Node:
        """
        Update non-structural fields of a node.

        Parent pointers and child lists are not updatable here; use move().

        Raises:
            ValidationError: On unknown or malformed fields
            NotFoundError: If the node does not exist
        """
        values = self._validate_update(kind, fields)

        async with unit_of_work(self.db, f"update_{kind.value.lower()}"):
            node = await self.get(kind, node_id, for_update=True)
            if values:
                node = await node_crud(kind).update_by_id(self.db, node_id, **values)

        logger.info(
            f"{kind.value} updated",
            extra={"node_id": str(node_id), "updates": sorted(values)},
        )
        return node

    async def list_children(self, kind: NodeKind, node_id: UUID) -> list[NodeRef]:
        """
        List the direct children of a node, folders first, in insertion order.

        Raises:
            NotFoundError: If the node does not exist
        """
        node = await self.get(kind, node_id)
        if not kind.is_container:
            return []
        folders, files = child_ids(node)
        return [NodeRef(NodeKind.FOLDER, UUID(i)) for i in folders] + [
            NodeRef(NodeKind.FILE, UUID(i)) for i in files
        ]

    async def get_children(
        self,
        kind: NodeKind,
        node_id: UUID,
    ) -> tuple[list[FolderModel], list[FileModel]]:
        """
        Resolve the direct children of a Course or Folder to records.

        Returns:
            tuple: (folders, files), each in the parent's list order
        """
        refs = await self.list_children(kind, node_id)
        folder_ids = [r.id for r in refs if r.kind is NodeKind.FOLDER]
        file_ids = [r.id for r in refs if r.kind is NodeKind.FILE]
        folders = {f.id: f for f in await folder_crud.get_many(self.db, folder_ids)}
        files = {f.id: f for f in await file_crud.get_many(self.db, file_ids)}
        return (
            [folders[i] for i in folder_ids if i in folders],
            [files[i] for i in file_ids if i in files],
        )

    async def move(self, kind: NodeKind, node_id: UUID, new_parent: ParentRef) -> Node:
        """
        Re-parent a Folder or File.

        Raises:
            ValidationError: If kind is Course or the move would create a cycle
            NotFoundError: If the node or the new parent does not exist
        """
        if kind is NodeKind.COURSE:
            raise ValidationError("Courses have no parent", field="parent")

        async with unit_of_work(self.db, f"move_{kind.value.lower()}"):
            node = await self.get(kind, node_id, for_update=True)
            parent = await self.get(new_parent.kind, new_parent.id, for_update=True)
            if kind is NodeKind.FOLDER:
                await self._ensure_not_descendant(node_id, new_parent)
            if node.parent_ref != new_parent:
                await self.maintainer.detach(node)
                await self.maintainer.attach(node, parent)

        logger.info(
            f"{kind.value} moved",
            extra={"node_id": str(node_id), "parent_id": str(new_parent.id)},
        )
        return node

    async def list_courses(
        self,
        featured_only: bool = False,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[CourseModel]:
        if featured_only:
            return await course_crud.get_featured(self.db, limit=limit, offset=offset)
        return await course_crud.get_all(self.db, limit=limit, offset=offset)

    async def list_featured_files(self, limit: int | None = None) -> Sequence[FileModel]:
        return await file_crud.get_featured(self.db, limit=limit)

    async def _ensure_not_descendant(self, folder_id: UUID, new_parent: ParentRef) -> None:
        """Walk up from new_parent and refuse if folder_id is on the path."""
        ref: ParentRef = new_parent
        while ref.kind is NodeKind.FOLDER:
            if ref.id == folder_id:
                raise ValidationError(
                    "Cannot move a folder into itself or its own subtree",
                    field="parent",
                )
            ancestor = await self.get(NodeKind.FOLDER, ref.id)
            ref = ancestor.parent_ref

    def _validate_create(
        self,
        kind: NodeKind,
        fields: dict[str, Any],
    ) -> tuple[dict[str, Any], ParentRef | None]:
        values: dict[str, Any] = {"name": clean_name(fields.get("name"))}

        if kind is NodeKind.COURSE:
            values["description"] = clean_optional_text(
                fields.get("description"), "description", DESCRIPTION_MAX_LENGTH
            )
            values["is_featured"] = clean_flag(fields.get("is_featured", False), "is_featured")
            values["admin_id"] = _require_uuid(fields, "admin_id")
            return values, None

        parent_ref = parent_from_fields(
            fields.get("course_id"), fields.get("parent_folder_id")
        )
        values["uploader_id"] = _require_uuid(fields, "uploader_id")
        if kind is NodeKind.FILE:
            values["url"] = _require_text(fields, "url")
            values["blob_key"] = _require_text(fields, "blob_key")
            values["is_featured"] = clean_flag(fields.get("is_featured", False), "is_featured")
        return values, parent_ref

    def _validate_update(self, kind: NodeKind, fields: dict[str, Any]) -> dict[str, Any]:
        reject_unknown_fields(fields, UPDATABLE_FIELDS[kind], kind.value)
        values: dict[str, Any] = {}
        if "name" in fields:
            values["name"] = clean_name(fields["name"])
        if "description" in fields:
            values["description"] = clean_optional_text(
                fields["description"], "description", DESCRIPTION_MAX_LENGTH
            )
        if "is_featured" in fields:
            values["is_featured"] = clean_flag(fields["is_featured"], "is_featured")
        return values
