"""
Favorites API endpoints.

Routes:
- GET /users/me/favorites - List the acting user's favorite courses and files
- POST /users/me/favorites - Add a favorite
- DELETE /users/me/favorites/{kind}/{id} - Remove a favorite

Dependencies: coursehub.application.services.favorites_index, coursehub.models
System role: Favorites HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from coursehub.api.deps.dependencies import get_acting_user, get_favorites_index
from coursehub.api.routers.courses.course_responses import (
    map_courses_to_response,
    map_file_to_response,
)
from coursehub.api.routers.router_utils import handle_store_errors
from coursehub.application.services import FavoritesIndex
from coursehub.core.authorization import ActingUser
from coursehub.core.nodes import NodeKind
from coursehub.models.favorite import FavoriteRequest, FavoritesResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users/me/favorites", tags=["favorites"])


@router.get("", response_model=FavoritesResponse)
@handle_store_errors
async def list_favorites(
    user: ActingUser = Depends(get_acting_user),
    favorites: FavoritesIndex = Depends(get_favorites_index),
) -> FavoritesResponse:
    """List live favorites; entries pointing at deleted resources are dropped."""
    result = await favorites.list_favorites(user.id)
    return FavoritesResponse(
        courses=map_courses_to_response(result.courses),
        files=[map_file_to_response(f) for f in result.files],
    )


@router.post("", status_code=status.HTTP_204_NO_CONTENT)
@handle_store_errors
async def add_favorite(
    request: FavoriteRequest,
    user: ActingUser = Depends(get_acting_user),
    favorites: FavoritesIndex = Depends(get_favorites_index),
) -> Response:
    """
    Add a course or file to the acting user's favorites.

    Raises:
        HTTPException(400): Folder target
        HTTPException(404): Target not found
    """
    await favorites.add_favorite(user.id, request.resource_kind, request.resource_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{resource_kind}/{resource_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_store_errors
async def remove_favorite(
    resource_kind: NodeKind,
    resource_id: UUID,
    user: ActingUser = Depends(get_acting_user),
    favorites: FavoritesIndex = Depends(get_favorites_index),
) -> Response:
    await favorites.remove_favorite(user.id, resource_kind, resource_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
