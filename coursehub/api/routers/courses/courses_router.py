"""
Course API endpoints.

Routes:
- POST /courses - Create new course (admin)
- GET /courses - List courses, optionally featured only
- GET /courses/{id} - Get single course
- GET /courses/{id}/contents - List top-level folders and files
- PUT /courses/{id} - Update course (owning admin)
- DELETE /courses/{id} - Delete course and everything under it

Dependencies: coursehub.application.services, coursehub.models
System role: Course management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from coursehub.api.deps.dependencies import get_acting_user, get_hierarchy_service
from coursehub.api.routers.router_utils import handle_store_errors
from coursehub.application.services import HierarchyService
from coursehub.core.authorization import ActingUser
from coursehub.core.nodes import NodeKind
from coursehub.models.course import (
    CourseResponse,
    CreateCourseRequest,
    UpdateCourseRequest,
)
from coursehub.models.folder import ContentsResponse
from coursehub.models.node import DeleteResponse

from .course_responses import (
    map_contents_to_response,
    map_course_to_response,
    map_courses_to_response,
    map_report_to_response,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/courses", tags=["courses"])


@router.post("", response_model=CourseResponse, status_code=201)
@handle_store_errors
async def create_course(
    request: CreateCourseRequest,
    user: ActingUser = Depends(get_acting_user),
    service: HierarchyService = Depends(get_hierarchy_service),
) -> CourseResponse:
    """
    Create new course owned by the acting admin.

    Raises:
        HTTPException(400): Invalid request
        HTTPException(403): Acting user is not an admin
    """
    course = await service.create_course(user, request.model_dump())
    return map_course_to_response(course)


@router.get("", response_model=list[CourseResponse])
@handle_store_errors
async def list_courses(
    featured: bool = False,
    limit: int = Query(default=100, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    service: HierarchyService = Depends(get_hierarchy_service),
) -> list[CourseResponse]:
    """
    List courses with pagination.

    Args:
        featured: Only return featured courses
        limit: Maximum number of courses (default 100)
        offset: Number to skip (default 0)
    """
    courses = await service.list_courses(featured_only=featured, limit=limit, offset=offset)
    logger.info(
        "Courses retrieved",
        extra={"count": len(courses), "featured": featured, "limit": limit, "offset": offset},
    )
    return map_courses_to_response(courses)


@router.get("/{course_id}", response_model=CourseResponse)
@handle_store_errors
async def get_course(
    course_id: UUID,
    service: HierarchyService = Depends(get_hierarchy_service),
) -> CourseResponse:
    course = await service.get_node(NodeKind.COURSE, course_id)
    return map_course_to_response(course)


@router.get("/{course_id}/contents", response_model=ContentsResponse)
@handle_store_errors
async def get_course_contents(
    course_id: UUID,
    service: HierarchyService = Depends(get_hierarchy_service),
) -> ContentsResponse:
    """List the course's top-level folders and files in insertion order."""
    folders, files = await service.get_children(NodeKind.COURSE, course_id)
    return map_contents_to_response(folders, files)


@router.put("/{course_id}", response_model=CourseResponse)
@handle_store_errors
async def update_course(
    course_id: UUID,
    request: UpdateCourseRequest,
    user: ActingUser = Depends(get_acting_user),
    service: HierarchyService = Depends(get_hierarchy_service),
) -> CourseResponse:
    """
    Update course name, description or featured flag.

    Raises:
        HTTPException(403): Acting user is neither the course admin nor an admin
        HTTPException(404): Course not found
    """
    course = await service.update_node(
        user, NodeKind.COURSE, course_id, request.model_dump(exclude_unset=True)
    )
    return map_course_to_response(course)


@router.delete("/{course_id}", response_model=DeleteResponse)
@handle_store_errors
async def delete_course(
    course_id: UUID,
    user: ActingUser = Depends(get_acting_user),
    service: HierarchyService = Depends(get_hierarchy_service),
) -> DeleteResponse:
    """
    Delete course with all folders, files, reviews and favorites under it.

    Raises:
        HTTPException(404): Course not found
        HTTPException(503): Cascade stopped early; repeating the call resumes it
    """
    report = await service.delete_node(user, NodeKind.COURSE, course_id)
    return map_report_to_response(report)
