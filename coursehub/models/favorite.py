"""
Favorite domain models and schemas.

Dependencies: pydantic
System role: Favorites API contracts
"""

import uuid

from pydantic import BaseModel, Field

from coursehub.core.nodes import NodeKind
from coursehub.models.course import CourseResponse
from coursehub.models.file import FileResponse


class FavoriteRequest(BaseModel):
    """Request schema for adding or removing a favorite."""

    resource_kind: NodeKind = Field(..., description="Course or File")
    resource_id: uuid.UUID


class FavoritesResponse(BaseModel):
    """The acting user's favorited courses and files."""

    courses: list[CourseResponse]
    files: list[FileResponse]
