"""
Shared node schemas.

Parent references and cascade results used by the course, folder and
file endpoints.

Dependencies: pydantic
System role: Hierarchy API contracts
"""

import uuid

from pydantic import BaseModel, Field

from coursehub.core.nodes import ParentRef, parent_from_fields


class ParentFields(BaseModel):
    """Exactly one of course_id / parent_folder_id names the parent."""

    course_id: uuid.UUID | None = Field(None, description="Owning course for top-level items")
    parent_folder_id: uuid.UUID | None = Field(None, description="Owning folder for nested items")

    def to_parent_ref(self) -> ParentRef:
        return parent_from_fields(self.course_id, self.parent_folder_id)


class MoveRequest(ParentFields):
    """Request schema for re-parenting a folder or file."""


class DeleteResponse(BaseModel):
    """Summary of a cascading delete."""

    courses: int
    folders: int
    files: int
    reviews: int
    favorites: int
    stranded_blob_keys: list[str] = Field(
        default_factory=list,
        description="Blob keys whose delete failed and need manual cleanup",
    )
