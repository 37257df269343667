"""
Rating aggregation engine.

Recomputes the average rating stored on a Course or File from its live
reviews. Runs inside the caller's transaction, after the review write it
accounts for, with the target row locked so concurrent review writes on
the same resource serialize.

Dependencies: sqlalchemy, coursehub.boundary.db, coursehub.core.rating
System role: Keeps the derived rating aggregate consistent with reviews
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.boundary.db.CRUD import node_crud, review_crud
from coursehub.core.nodes import NodeKind, ensure_reviewable
from coursehub.core.rating import average_rating

logger = logging.getLogger(__name__)


class RatingAggregator:
    """Recompute and persist average ratings."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize aggregator with async database session.

        Args:
            db: Async SQLAlchemy session shared with the review write
        """
        self.db = db

    async def recompute(self, resource_kind: NodeKind, resource_id: UUID) -> float | None:
        """
        Recompute the average rating of a Course or File.

        Args:
            resource_kind: Course or File
            resource_id: Resource UUID

        Returns:
            float | None: New average (0.0 when unrated), or None when the
            resource no longer exists

        Raises:
            ValidationError: If resource_kind is Folder
        """
        ensure_reviewable(resource_kind)
        target = await node_crud(resource_kind).get_by_id(
            self.db, resource_id, for_update=True
        )
        if target is None:
            logger.debug(
                "Rating recompute skipped, resource gone",
                extra={"resource_kind": resource_kind.value, "resource_id": str(resource_id)},
            )
            return None

        ratings = await review_crud.get_ratings(self.db, resource_kind, resource_id)
        new_average = average_rating(ratings)
        if target.average_rating != new_average:
            target.average_rating = new_average
            await self.db.flush()

        logger.info(
            "Average rating recomputed",
            extra={
                "resource_kind": resource_kind.value,
                "resource_id": str(resource_id),
                "review_count": len(ratings),
                "average_rating": new_average,
            },
        )
        return new_average
