"""
Course domain models and schemas.

Request/response schemas for course operations.

Dependencies: pydantic
System role: Course API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CreateCourseRequest(BaseModel):
    """Request schema for creating a new course."""

    name: str = Field(..., description="Course name")
    description: str | None = Field(None, description="Course description")
    is_featured: bool = Field(default=False, description="Show on the featured listing")


class UpdateCourseRequest(BaseModel):
    """Request schema for updating a course."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(None, description="Course name")
    description: str | None = Field(None, description="Course description")
    is_featured: bool | None = Field(None, description="Show on the featured listing")


class CourseResponse(BaseModel):
    """Response schema for course operations."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    description: str | None
    is_featured: bool
    average_rating: float
    folder_ids: list[uuid.UUID]
    file_ids: list[uuid.UUID]
    admin_id: uuid.UUID
    created_at: datetime
    updated_at: datetime
