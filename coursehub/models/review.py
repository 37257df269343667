"""
Review domain models and schemas.

Dependencies: pydantic
System role: Review API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from coursehub.core.nodes import NodeKind


class CreateReviewRequest(BaseModel):
    """Request schema for rating a course or file."""

    resource_kind: NodeKind = Field(..., description="Course or File")
    resource_id: uuid.UUID
    rating: int = Field(..., description="Whole number from 1 to 5")
    comment: str | None = Field(None, description="Optional comment")


class ReviewResponse(BaseModel):
    """Response schema for review operations."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    rating: int
    comment: str | None
    resource_kind: NodeKind
    resource_id: uuid.UUID
    user_id: uuid.UUID
    created_at: datetime
