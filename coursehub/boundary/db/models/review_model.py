"""
Review ORM model.

A rating with optional comment left by one user on one Course or File.
Reviews are immutable; changing a review means deleting and recreating it.

Dependencies: sqlalchemy, coursehub.boundary.db.base
System role: Review persistence and rating source data
"""

import uuid

from sqlalchemy import CheckConstraint, Index, Integer, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from coursehub.boundary.db.base import Base, UUIDMixin, TimestampMixin, node_kind_type
from coursehub.core.nodes import NodeKind


class ReviewModel(Base, UUIDMixin, TimestampMixin):
    """
    Review ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        rating: Integer 1-5
        comment: Optional comment (500 char limit)
        resource_kind: Course or File
        resource_id: ID of the reviewed resource
        user_id: Author
        created_at: Creation timestamp (UTC)

    Constraints:
        One review per (user_id, resource_kind, resource_id)
    """

    __tablename__ = "reviews"
    __table_args__ = (
        UniqueConstraint(
            "user_id",
            "resource_kind",
            "resource_id",
            name="uq_reviews_user_resource",
        ),
        CheckConstraint("rating BETWEEN 1 AND 5", name="ck_reviews_rating"),
        CheckConstraint(
            "resource_kind IN ('Course', 'File')",
            name="ck_reviews_resource_kind",
        ),
        Index("ix_reviews_resource", "resource_kind", "resource_id"),
    )

    rating: Mapped[int] = mapped_column(Integer, nullable=False)

    comment: Mapped[str | None] = mapped_column(String(500), nullable=True)

    resource_kind: Mapped[NodeKind] = mapped_column(node_kind_type(), nullable=False)

    resource_id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), nullable=False)

    user_id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), nullable=False)
