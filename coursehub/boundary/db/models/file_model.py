"""
File (document) ORM model.

Leaf node of the hierarchy. Points at the blob holding the document bytes
and carries its own review aggregate.

Dependencies: sqlalchemy, coursehub.boundary.db.base
System role: Document persistence
"""

import uuid

from sqlalchemy import Boolean, CheckConstraint, Float, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from coursehub.boundary.db.base import Base, UUIDMixin, TimestampMixin, node_kind_type
from coursehub.core.nodes import NodeKind, ParentRef


class FileModel(Base, UUIDMixin, TimestampMixin):
    """
    File ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        name: Document name (100 char limit)
        url: Public URL of the stored blob
        blob_key: Blob-store key used for deletion
        parent_kind: Course or Folder
        parent_id: ID of the owning Course or Folder
        uploader_id: User who uploaded the document
        is_featured: Shown in featured listings
        average_rating: Mean review rating, one decimal, 0.0 when unrated
        created_at: Upload timestamp (UTC)
        updated_at: Last modification timestamp (UTC)
    """

    __tablename__ = "files"
    __table_args__ = (
        CheckConstraint(
            "parent_kind IN ('Course', 'Folder')",
            name="ck_files_parent_kind",
        ),
        Index("ix_files_parent", "parent_kind", "parent_id"),
    )

    node_kind = NodeKind.FILE

    name: Mapped[str] = mapped_column(String(100), nullable=False, doc="Document name")

    url: Mapped[str] = mapped_column(String(1024), nullable=False, doc="Blob URL")

    blob_key: Mapped[str] = mapped_column(String(1024), nullable=False, doc="Blob-store key")

    parent_kind: Mapped[NodeKind] = mapped_column(node_kind_type(), nullable=False)

    parent_id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), nullable=False)

    uploader_id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), nullable=False)

    is_featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    average_rating: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)

    @property
    def parent_ref(self) -> ParentRef:
        return ParentRef(self.parent_kind, self.parent_id)

    @property
    def owner_id(self) -> uuid.UUID:
        return self.uploader_id
