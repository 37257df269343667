"""
Folder domain models and schemas.

Dependencies: pydantic
System role: Folder API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from coursehub.core.nodes import NodeKind
from coursehub.models.file import FileResponse
from coursehub.models.node import ParentFields


class CreateFolderRequest(ParentFields):
    """Request schema for creating a folder under a course or folder."""

    name: str = Field(..., description="Folder name")


class UpdateFolderRequest(BaseModel):
    """Request schema for renaming a folder."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., description="Folder name")


class FolderResponse(BaseModel):
    """Response schema for folder operations."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    parent_kind: NodeKind
    parent_id: uuid.UUID
    subfolder_ids: list[uuid.UUID]
    file_ids: list[uuid.UUID]
    uploader_id: uuid.UUID
    created_at: datetime
    updated_at: datetime


class ContentsResponse(BaseModel):
    """Direct children of a course or folder, in insertion order."""

    folders: list[FolderResponse]
    files: list[FileResponse]
