"""
Favorite ORM model.

Weak reference from a user to a Course or File. Nothing keeps the target
alive; rows pointing at deleted targets are filtered on read and pruned.

Dependencies: sqlalchemy, coursehub.boundary.db.base
System role: Per-user favorites persistence
"""

import uuid

from sqlalchemy import CheckConstraint, Index, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from coursehub.boundary.db.base import Base, UUIDMixin, TimestampMixin, node_kind_type
from coursehub.core.nodes import NodeKind


class FavoriteModel(Base, UUIDMixin, TimestampMixin):
    """
    Favorite ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        user_id: Owning user
        resource_kind: Course or File
        resource_id: Referenced resource (may no longer exist)
        created_at: When the favorite was added (UTC)
    """

    __tablename__ = "favorites"
    __table_args__ = (
        UniqueConstraint(
            "user_id",
            "resource_kind",
            "resource_id",
            name="uq_favorites_user_resource",
        ),
        CheckConstraint(
            "resource_kind IN ('Course', 'File')",
            name="ck_favorites_resource_kind",
        ),
        Index("ix_favorites_resource", "resource_kind", "resource_id"),
    )

    user_id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), nullable=False)

    resource_kind: Mapped[NodeKind] = mapped_column(node_kind_type(), nullable=False)

    resource_id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), nullable=False)
