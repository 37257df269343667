"""
Hierarchy service orchestrator.

Entry point for node operations coming from the request layer. Checks the
acting user's rights once, then delegates to the NodeRepository or the
CascadeDeletionEngine. Also runs the document upload flow: bytes go to the
blob store first, and are released again if the File record cannot be
created.

Dependencies: coursehub.application.services, coursehub.boundary, coursehub.core
System role: Course/Folder/File use case orchestration
"""

import asyncio
import logging
from typing import Any, Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.application.services.cascade_deletion import (
    CascadeDeletionEngine,
    CascadeReport,
)
from coursehub.application.services.node_repository import Node, NodeRepository
from coursehub.boundary.blob_store import BlobStore
from coursehub.boundary.db.models import CourseModel, FileModel, FolderModel
from coursehub.core.authorization import ActingUser, ensure_admin, ensure_owner_or_admin
from coursehub.core.nodes import NodeKind, ParentRef
from coursehub.core.validation import clean_name
from coursehub.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


class HierarchyService:
    """Course/Folder/File service orchestrator."""

    def __init__(
        self,
        db: AsyncSession,
        blob_store: BlobStore,
        step_timeout: float | None = None,
        repository: NodeRepository | None = None,
        cascade: CascadeDeletionEngine | None = None,
    ) -> None:
        """
        Initialize hierarchy service.

        Args:
            db: Async SQLAlchemy session
            blob_store: Blob store client for document bytes
            step_timeout: Per-node timeout for cascade deletion
            repository: NodeRepository (created if None)
            cascade: CascadeDeletionEngine (created if None)
        """
        self.db = db
        self._blob_store = blob_store
        self.repository = repository or NodeRepository(db)
        self.cascade = cascade or CascadeDeletionEngine(
            db,
            blob_store,
            step_timeout=step_timeout,
            maintainer=self.repository.maintainer,
        )

    async def create_course(self, user: ActingUser, fields: dict[str, Any]) -> CourseModel:
        """
        Create a course owned by the acting admin.

        Raises:
            AuthorizationError: If the user is not an admin
        """
        ensure_admin(user, "create courses")
        return await self.repository.create(NodeKind.COURSE, {**fields, "admin_id": user.id})

    async def create_folder(
        self,
        user: ActingUser,
        name: str,
        parent: ParentRef,
    ) -> FolderModel:
        """Create a folder under a Course or Folder, uploaded by the acting user."""
        return await self.repository.create(
            NodeKind.FOLDER,
            {
                "name": name,
                "uploader_id": user.id,
                **self._parent_fields(parent),
            },
        )

    async def upload_file(
        self,
        user: ActingUser,
        name: str,
        parent: ParentRef,
        data: bytes,
        content_type: str = "application/octet-stream",
        is_featured: bool = False,
    ) -> FileModel:
        """
        Store a document and create its File record.

        The name and parent are checked before any bytes are uploaded. If
        the record cannot be created, the uploaded blob is deleted again.

        Raises:
            ValidationError: Bad name or parent
            NotFoundError: If the parent does not exist
            DependencyError: If the upload or the store fails
        """
        name = clean_name(name)
        await self.repository.get(parent.kind, parent.id)

        blob = await asyncio.to_thread(
            self._blob_store.put,
            data,
            {"filename": name, "content_type": content_type, "uploader_id": str(user.id)},
        )
        try:
            return await self.repository.create(
                NodeKind.FILE,
                {
                    "name": name,
                    "url": blob.url,
                    "blob_key": blob.key,
                    "uploader_id": user.id,
                    "is_featured": is_featured,
                    **self._parent_fields(parent),
                },
            )
        except Exception:
            logger.warning(
                "File record creation failed, releasing uploaded blob",
                extra={"blob_key": blob.key},
            )
            try:
                await asyncio.to_thread(self._blob_store.delete, blob.key)
            except Exception as cleanup_error:
                log_exception_with_context(
                    logger,
                    "Uploaded blob could not be released",
                    cleanup_error,
                    level=logging.WARNING,
                    blob_key=blob.key,
                )
            raise

    async def get_node(self, kind: NodeKind, node_id: UUID) -> Node:
        return await self.repository.get(kind, node_id)

    async def get_children(
        self,
        kind: NodeKind,
        node_id: UUID,
    ) -> tuple[list[FolderModel], list[FileModel]]:
        return await self.repository.get_children(kind, node_id)

    async def list_courses(
        self,
        featured_only: bool = False,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[CourseModel]:
        return await self.repository.list_courses(featured_only, limit=limit, offset=offset)

    async def list_featured_files(self, limit: int | None = None) -> Sequence[FileModel]:
        return await self.repository.list_featured_files(limit=limit)

    async def update_node(
        self,
        user: ActingUser,
        kind: NodeKind,
        node_id: UUID,
        fields: dict[str, Any],
    ) -> Node:
        """
        Update a node's own fields (owner or admin).

        Raises:
            NotFoundError: If the node does not exist
            AuthorizationError: If the user is neither owner nor admin
        """
        node = await self.repository.get(kind, node_id)
        ensure_owner_or_admin(user, node.owner_id, f"update this {kind.value.lower()}")
        return await self.repository.update_fields(kind, node_id, fields)

    async def move_node(
        self,
        user: ActingUser,
        kind: NodeKind,
        node_id: UUID,
        new_parent: ParentRef,
    ) -> Node:
        """Re-parent a Folder or File (owner or admin)."""
        node = await self.repository.get(kind, node_id)
        ensure_owner_or_admin(user, node.owner_id, f"move this {kind.value.lower()}")
        return await self.repository.move(kind, node_id, new_parent)

    async def delete_node(
        self,
        user: ActingUser,
        kind: NodeKind,
        node_id: UUID,
    ) -> CascadeReport:
        """
        Delete a node and its subtree (owner or admin).

        Raises:
            NotFoundError: If the node does not exist
            AuthorizationError: If the user is neither owner nor admin
            DependencyError: If the cascade stops early; safe to retry
        """
        node = await self.repository.get(kind, node_id)
        ensure_owner_or_admin(user, node.owner_id, f"delete this {kind.value.lower()}")
        return await self.cascade.delete_node(kind, node_id)

    @staticmethod
    def _parent_fields(parent: ParentRef) -> dict[str, UUID]:
        if parent.kind is NodeKind.COURSE:
            return {"course_id": parent.id}
        return {"parent_folder_id": parent.id}
