"""
File API endpoints.

Routes:
- POST /files - Upload document into a course or folder
- GET /files/featured - List featured files
- GET /files/{id} - Get single file
- PUT /files/{id} - Update name or featured flag (uploader or admin)
- POST /files/{id}/move - Re-parent file (uploader or admin)
- DELETE /files/{id} - Delete file, its blob, reviews and favorites

Dependencies: coursehub.application.services, coursehub.models
System role: File management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile

from coursehub.api.deps.dependencies import get_acting_user, get_hierarchy_service
from coursehub.api.routers.courses.course_responses import (
    map_file_to_response,
    map_report_to_response,
)
from coursehub.api.routers.router_utils import handle_store_errors
from coursehub.application.services import HierarchyService
from coursehub.core.authorization import ActingUser
from coursehub.core.nodes import NodeKind, parent_from_fields
from coursehub.models.file import FileResponse, UpdateFileRequest
from coursehub.models.node import DeleteResponse, MoveRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/files", tags=["files"])


@router.post("", response_model=FileResponse, status_code=201)
@handle_store_errors
async def upload_file(
    file: UploadFile = File(...),
    name: str | None = Form(default=None),
    course_id: UUID | None = Form(default=None),
    parent_folder_id: UUID | None = Form(default=None),
    is_featured: bool = Form(default=False),
    user: ActingUser = Depends(get_acting_user),
    service: HierarchyService = Depends(get_hierarchy_service),
) -> FileResponse:
    """
    Upload a document and register it under a course or folder.

    Args:
        file: Document bytes
        name: Display name (defaults to the uploaded filename)
        course_id: Owning course for top-level files
        parent_folder_id: Owning folder for nested files
        is_featured: Show on the featured listing

    Raises:
        HTTPException(400): Both or neither parent fields given, bad name
        HTTPException(404): Parent not found
        HTTPException(503): Blob store unavailable
    """
    parent = parent_from_fields(course_id, parent_folder_id)
    data = await file.read()

    logger.info(
        "Uploading file",
        extra={"filename": file.filename, "size_bytes": len(data), "parent_id": str(parent.id)},
    )

    record = await service.upload_file(
        user,
        name or file.filename or "",
        parent,
        data,
        content_type=file.content_type or "application/octet-stream",
        is_featured=is_featured,
    )
    return map_file_to_response(record)


@router.get("/featured", response_model=list[FileResponse])
@handle_store_errors
async def list_featured_files(
    limit: int = Query(default=20, ge=1, le=100),
    service: HierarchyService = Depends(get_hierarchy_service),
) -> list[FileResponse]:
    """List featured files, newest first."""
    files = await service.list_featured_files(limit=limit)
    return [map_file_to_response(f) for f in files]


@router.get("/{file_id}", response_model=FileResponse)
@handle_store_errors
async def get_file(
    file_id: UUID,
    service: HierarchyService = Depends(get_hierarchy_service),
) -> FileResponse:
    record = await service.get_node(NodeKind.FILE, file_id)
    return map_file_to_response(record)


@router.put("/{file_id}", response_model=FileResponse)
@handle_store_errors
async def update_file(
    file_id: UUID,
    request: UpdateFileRequest,
    user: ActingUser = Depends(get_acting_user),
    service: HierarchyService = Depends(get_hierarchy_service),
) -> FileResponse:
    record = await service.update_node(
        user, NodeKind.FILE, file_id, request.model_dump(exclude_unset=True)
    )
    return map_file_to_response(record)


@router.post("/{file_id}/move", response_model=FileResponse)
@handle_store_errors
async def move_file(
    file_id: UUID,
    request: MoveRequest,
    user: ActingUser = Depends(get_acting_user),
    service: HierarchyService = Depends(get_hierarchy_service),
) -> FileResponse:
    record = await service.move_node(user, NodeKind.FILE, file_id, request.to_parent_ref())
    return map_file_to_response(record)


@router.delete("/{file_id}", response_model=DeleteResponse)
@handle_store_errors
async def delete_file(
    file_id: UUID,
    user: ActingUser = Depends(get_acting_user),
    service: HierarchyService = Depends(get_hierarchy_service),
) -> DeleteResponse:
    """
    Delete a file with its blob, reviews and favorites.

    A blob that could not be deleted is listed in stranded_blob_keys; the
    record is still removed.
    """
    report = await service.delete_node(user, NodeKind.FILE, file_id)
    return map_report_to_response(report)
