"""
Folder API endpoints.

Routes:
- POST /folders - Create folder under a course or folder
- GET /folders/{id} - Get single folder
- GET /folders/{id}/contents - List subfolders and files
- PUT /folders/{id} - Rename folder (uploader or admin)
- POST /folders/{id}/move - Re-parent folder (uploader or admin)
- DELETE /folders/{id} - Delete folder and its subtree

Dependencies: coursehub.application.services, coursehub.models
System role: Folder management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from coursehub.api.deps.dependencies import get_acting_user, get_hierarchy_service
from coursehub.api.routers.courses.course_responses import (
    map_contents_to_response,
    map_folder_to_response,
    map_report_to_response,
)
from coursehub.api.routers.router_utils import handle_store_errors
from coursehub.application.services import HierarchyService
from coursehub.core.authorization import ActingUser
from coursehub.core.nodes import NodeKind
from coursehub.models.folder import (
    ContentsResponse,
    CreateFolderRequest,
    FolderResponse,
    UpdateFolderRequest,
)
from coursehub.models.node import DeleteResponse, MoveRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/folders", tags=["folders"])


@router.post("", response_model=FolderResponse, status_code=201)
@handle_store_errors
async def create_folder(
    request: CreateFolderRequest,
    user: ActingUser = Depends(get_acting_user),
    service: HierarchyService = Depends(get_hierarchy_service),
) -> FolderResponse:
    """
    Create a folder in a course or inside another folder.

    Raises:
        HTTPException(400): Both or neither parent fields given, bad name
        HTTPException(404): Parent not found
    """
    folder = await service.create_folder(user, request.name, request.to_parent_ref())
    return map_folder_to_response(folder)


@router.get("/{folder_id}", response_model=FolderResponse)
@handle_store_errors
async def get_folder(
    folder_id: UUID,
    service: HierarchyService = Depends(get_hierarchy_service),
) -> FolderResponse:
    folder = await service.get_node(NodeKind.FOLDER, folder_id)
    return map_folder_to_response(folder)


@router.get("/{folder_id}/contents", response_model=ContentsResponse)
@handle_store_errors
async def get_folder_contents(
    folder_id: UUID,
    service: HierarchyService = Depends(get_hierarchy_service),
) -> ContentsResponse:
    folders, files = await service.get_children(NodeKind.FOLDER, folder_id)
    return map_contents_to_response(folders, files)


@router.put("/{folder_id}", response_model=FolderResponse)
@handle_store_errors
async def update_folder(
    folder_id: UUID,
    request: UpdateFolderRequest,
    user: ActingUser = Depends(get_acting_user),
    service: HierarchyService = Depends(get_hierarchy_service),
) -> FolderResponse:
    folder = await service.update_node(
        user, NodeKind.FOLDER, folder_id, request.model_dump(exclude_unset=True)
    )
    return map_folder_to_response(folder)


@router.post("/{folder_id}/move", response_model=FolderResponse)
@handle_store_errors
async def move_folder(
    folder_id: UUID,
    request: MoveRequest,
    user: ActingUser = Depends(get_acting_user),
    service: HierarchyService = Depends(get_hierarchy_service),
) -> FolderResponse:
    """
    Move a folder under another course or folder.

    Raises:
        HTTPException(400): Target is the folder itself or one of its descendants
        HTTPException(404): Folder or target not found
    """
    folder = await service.move_node(user, NodeKind.FOLDER, folder_id, request.to_parent_ref())
    return map_folder_to_response(folder)


@router.delete("/{folder_id}", response_model=DeleteResponse)
@handle_store_errors
async def delete_folder(
    folder_id: UUID,
    user: ActingUser = Depends(get_acting_user),
    service: HierarchyService = Depends(get_hierarchy_service),
) -> DeleteResponse:
    """Delete a folder with every subfolder and file below it."""
    report = await service.delete_node(user, NodeKind.FOLDER, folder_id)
    return map_report_to_response(report)
