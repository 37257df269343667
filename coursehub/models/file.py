"""
File domain models and schemas.

Dependencies: pydantic
System role: File API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from coursehub.core.nodes import NodeKind


class UpdateFileRequest(BaseModel):
    """Request schema for updating a file's own fields."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(None, description="Display name")
    is_featured: bool | None = Field(None, description="Show on the featured listing")


class FileResponse(BaseModel):
    """Response schema for file operations."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    url: str
    parent_kind: NodeKind
    parent_id: uuid.UUID
    uploader_id: uuid.UUID
    is_featured: bool
    average_rating: float
    created_at: datetime
    updated_at: datetime
