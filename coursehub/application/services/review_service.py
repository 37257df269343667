"""
Review service orchestrator.

Adds, lists and deletes reviews. Each write shares one transaction with
the rating recompute of its target, and the target row is locked first so
concurrent reviews of the same resource settle on a consistent average.

Dependencies: sqlalchemy, coursehub.boundary.db, coursehub.core
System role: Review use case orchestration
"""

import logging
from typing import Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.application.services.rating_aggregator import RatingAggregator
from coursehub.application.services.transaction import unit_of_work
from coursehub.boundary.db.CRUD import node_crud, review_crud
from coursehub.boundary.db.models import ReviewModel
from coursehub.core.authorization import ActingUser, ensure_owner_or_admin
from coursehub.core.exceptions import ConflictError, NotFoundError
from coursehub.core.nodes import NodeKind, ensure_reviewable
from coursehub.core.validation import COMMENT_MAX_LENGTH, clean_optional_text, clean_rating

logger = logging.getLogger(__name__)

DUPLICATE_REVIEW_MESSAGE = "You have already reviewed this resource"


class ReviewService:
    """Review service orchestrator."""

    def __init__(self, db: AsyncSession, aggregator: RatingAggregator | None = None) -> None:
        """
        Initialize review service with async database session.

        Args:
            db: Async SQLAlchemy session
            aggregator: RatingAggregator sharing the session (created if None)
        """
        self.db = db
        self.aggregator = aggregator or RatingAggregator(db)

    async def add_review(
        self,
        user: ActingUser,
        resource_kind: NodeKind,
        resource_id: UUID,
        rating: int,
        comment: str | None = None,
    ) -> ReviewModel:
        """
        Add a review and refresh the target's average rating.

        Args:
            user: Author
            resource_kind: Course or File
            resource_id: Reviewed resource UUID
            rating: Integer 1-5
            comment: Optional comment (500 chars max)

        Returns:
            ReviewModel: The committed review

        Raises:
            ValidationError: Bad kind, rating or comment (nothing written)
            NotFoundError: If the resource does not exist
            ConflictError: If the user already reviewed this resource
        """
        ensure_reviewable(resource_kind)
        rating = clean_rating(rating)
        comment = clean_optional_text(comment, "comment", COMMENT_MAX_LENGTH) or None

        async with unit_of_work(self.db, "add_review", DUPLICATE_REVIEW_MESSAGE):
            target = await node_crud(resource_kind).get_by_id(
                self.db, resource_id, for_update=True
            )
            if target is None:
                raise NotFoundError(resource_kind.value, resource_id)

            existing = await review_crud.get_by_user_and_resource(
                self.db, user.id, resource_kind, resource_id
            )
            if existing is not None:
                raise ConflictError(
                    DUPLICATE_REVIEW_MESSAGE,
                    {"review_id": str(existing.id), "resource_id": str(resource_id)},
                )

            review = await review_crud.create(
                self.db,
                rating=rating,
                comment=comment,
                resource_kind=resource_kind,
                resource_id=resource_id,
                user_id=user.id,
            )
            await self.aggregator.recompute(resource_kind, resource_id)

        logger.info(
            "Review added",
            extra={
                "review_id": str(review.id),
                "resource_kind": resource_kind.value,
                "resource_id": str(resource_id),
                "rating": rating,
            },
        )
        return review

    async def list_reviews(
        self,
        resource_kind: NodeKind,
        resource_id: UUID,
    ) -> Sequence[ReviewModel]:
        """
        List reviews of a Course or File, oldest first.

        Raises:
            ValidationError: If resource_kind is Folder
            NotFoundError: If the resource does not exist
        """
        ensure_reviewable(resource_kind)
        if not await node_crud(resource_kind).exists(self.db, resource_id):
            raise NotFoundError(resource_kind.value, resource_id)
        return await review_crud.get_by_resource(self.db, resource_kind, resource_id)

    async def get_review(self, review_id: UUID) -> ReviewModel:
        review = await review_crud.get_by_id(self.db, review_id)
        if review is None:
            raise NotFoundError("Review", review_id)
        return review

    async def delete_review(self, user: ActingUser, review_id: UUID) -> None:
        """
        Delete a review (author or admin) and refresh the target's rating.

        Raises:
            NotFoundError: If the review does not exist
            AuthorizationError: If the user is neither author nor admin
        """
        review = await self.get_review(review_id)
        ensure_owner_or_admin(user, review.user_id, "delete this review")
        resource_kind, resource_id = review.resource_kind, review.resource_id

        async with unit_of_work(self.db, "delete_review"):
            # Lock the target before touching its review set
            await node_crud(resource_kind).get_by_id(self.db, resource_id, for_update=True)
            deleted = await review_crud.delete_by_id(self.db, review_id)
            if not deleted:
                raise NotFoundError("Review", review_id)
            await self.aggregator.recompute(resource_kind, resource_id)

        logger.info(
            "Review deleted",
            extra={
                "review_id": str(review_id),
                "resource_kind": resource_kind.value,
                "resource_id": str(resource_id),
            },
        )
