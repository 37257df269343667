"""
Review API endpoints.

Routes:
- POST /reviews - Rate a course or file
- GET /reviews - List reviews of a course or file
- GET /reviews/{id} - Get single review
- DELETE /reviews/{id} - Delete review (author or admin)

Dependencies: coursehub.application.services.review_service, coursehub.models
System role: Review HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from coursehub.api.deps.dependencies import get_acting_user, get_review_service
from coursehub.api.routers.router_utils import handle_store_errors
from coursehub.application.services import ReviewService
from coursehub.core.authorization import ActingUser
from coursehub.core.nodes import NodeKind
from coursehub.models.review import CreateReviewRequest, ReviewResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reviews", tags=["reviews"])


@router.post("", response_model=ReviewResponse, status_code=201)
@handle_store_errors
async def add_review(
    request: CreateReviewRequest,
    user: ActingUser = Depends(get_acting_user),
    review_service: ReviewService = Depends(get_review_service),
) -> ReviewResponse:
    """
    Review a course or file; the target's average rating is refreshed.

    Raises:
        HTTPException(400): Folder target, rating outside 1-5, comment too long
        HTTPException(404): Target not found
        HTTPException(409): User already reviewed this target
    """
    review = await review_service.add_review(
        user,
        request.resource_kind,
        request.resource_id,
        request.rating,
        request.comment,
    )
    return ReviewResponse.model_validate(review)


@router.get("", response_model=list[ReviewResponse])
@handle_store_errors
async def list_reviews(
    resource_kind: NodeKind,
    resource_id: UUID,
    review_service: ReviewService = Depends(get_review_service),
) -> list[ReviewResponse]:
    reviews = await review_service.list_reviews(resource_kind, resource_id)
    return [ReviewResponse.model_validate(r) for r in reviews]


@router.get("/{review_id}", response_model=ReviewResponse)
@handle_store_errors
async def get_review(
    review_id: UUID,
    review_service: ReviewService = Depends(get_review_service),
) -> ReviewResponse:
    review = await review_service.get_review(review_id)
    return ReviewResponse.model_validate(review)


@router.delete("/{review_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_store_errors
async def delete_review(
    review_id: UUID,
    user: ActingUser = Depends(get_acting_user),
    review_service: ReviewService = Depends(get_review_service),
) -> Response:
    await review_service.delete_review(user, review_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
