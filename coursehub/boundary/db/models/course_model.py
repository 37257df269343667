"""
Course ORM model.

Root of a Course → Folder → File tree. Holds the ordered IDs of its
top-level folders and files and the aggregate rating of its reviews.

Dependencies: sqlalchemy, coursehub.boundary.db.base
System role: Course persistence
"""

import uuid

from sqlalchemy import JSON, Boolean, Float, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from coursehub.boundary.db.base import Base, UUIDMixin, TimestampMixin
from coursehub.core.nodes import NodeKind


class CourseModel(Base, UUIDMixin, TimestampMixin):
    """
    Course ORM model.

    Child lists store ID strings in insertion order. Every entry must have
    this course as its recorded parent; ReferenceMaintainer keeps both
    sides in step.

    Attributes:
        id: UUID primary key (auto-generated)
        name: Course name (100 char limit)
        description: Optional description (500 char limit)
        is_featured: Shown in featured listings
        average_rating: Mean review rating, one decimal, 0.0 when unrated
        folder_ids: Top-level folder IDs
        file_ids: Top-level file IDs
        admin_id: Admin user who created the course
        created_at: Course creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)
    """

    __tablename__ = "courses"

    node_kind = NodeKind.COURSE

    name: Mapped[str] = mapped_column(String(100), nullable=False, doc="Course name")

    description: Mapped[str | None] = mapped_column(
        String(500),
        nullable=True,
        default=None,
        doc="Course description",
    )

    is_featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    average_rating: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)

    folder_ids: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    file_ids: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    admin_id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), nullable=False)

    @property
    def owner_id(self) -> uuid.UUID:
        return self.admin_id
