"""
Folder ORM model.

Inner node of the hierarchy. Its parent is a Course or another Folder,
recorded as a tagged (parent_kind, parent_id) pair.

Dependencies: sqlalchemy, coursehub.boundary.db.base
System role: Folder persistence
"""

import uuid

from sqlalchemy import JSON, CheckConstraint, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from coursehub.boundary.db.base import Base, UUIDMixin, TimestampMixin, node_kind_type
from coursehub.core.nodes import NodeKind, ParentRef


class FolderModel(Base, UUIDMixin, TimestampMixin):
    """
    Folder ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        name: Folder name (100 char limit)
        parent_kind: Course or Folder
        parent_id: ID of the owning Course or Folder
        subfolder_ids: Child folder IDs in insertion order
        file_ids: Child file IDs in insertion order
        uploader_id: User who created the folder
        created_at: Folder creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)
    """

    __tablename__ = "folders"
    __table_args__ = (
        CheckConstraint(
            "parent_kind IN ('Course', 'Folder')",
            name="ck_folders_parent_kind",
        ),
        Index("ix_folders_parent", "parent_kind", "parent_id"),
    )

    node_kind = NodeKind.FOLDER

    name: Mapped[str] = mapped_column(String(100), nullable=False, doc="Folder name")

    parent_kind: Mapped[NodeKind] = mapped_column(node_kind_type(), nullable=False)

    parent_id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), nullable=False)

    subfolder_ids: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    file_ids: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    uploader_id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), nullable=False)

    @property
    def parent_ref(self) -> ParentRef:
        return ParentRef(self.parent_kind, self.parent_id)

    @property
    def owner_id(self) -> uuid.UUID:
        return self.uploader_id
