"""
Review CRUD operations.

Provides Create, Read, Update, Delete operations for ReviewModel
with per-resource queries and the rating aggregate query.

Dependencies: sqlalchemy, coursehub.boundary.db.models
System role: Review persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.boundary.db.models.review_model import ReviewModel
from coursehub.boundary.db.CRUD.base_crud import BaseCRUD
from coursehub.core.nodes import NodeKind


class ReviewCRUD(BaseCRUD[ReviewModel]):
    """CRUD operations for ReviewModel."""

    def __init__(self) -> None:
        """Initialize ReviewCRUD with ReviewModel."""
        super().__init__(ReviewModel)

    async def get_by_resource(
        self,
        session: AsyncSession,
        resource_kind: NodeKind,
        resource_id: UUID,
    ) -> Sequence[ReviewModel]:
        """
        Retrieve reviews of one Course or File, oldest first.

        Args:
            session: Async database session
            resource_kind: Course or File
            resource_id: Reviewed resource UUID

        Returns:
            Sequence of ReviewModels
        """
        stmt = (
            select(ReviewModel)
            .where(
                ReviewModel.resource_kind == resource_kind,
                ReviewModel.resource_id == resource_id,
            )
            .order_by(ReviewModel.created_at)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_by_user_and_resource(
        self,
        session: AsyncSession,
        user_id: UUID,
        resource_kind: NodeKind,
        resource_id: UUID,
    ) -> ReviewModel | None:
        """Retrieve the review a user left on a resource, if any."""
        stmt = select(ReviewModel).where(
            ReviewModel.user_id == user_id,
            ReviewModel.resource_kind == resource_kind,
            ReviewModel.resource_id == resource_id,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_ratings(
        self,
        session: AsyncSession,
        resource_kind: NodeKind,
        resource_id: UUID,
    ) -> list[int]:
        """Return the ratings of all live reviews on a resource."""
        stmt = select(ReviewModel.rating).where(
            ReviewModel.resource_kind == resource_kind,
            ReviewModel.resource_id == resource_id,
        )
        result = await session.execute(stmt)
        return list(result.scalars().all())

    async def delete_by_resource(
        self,
        session: AsyncSession,
        resource_kind: NodeKind,
        resource_id: UUID,
    ) -> int:
        """
        Delete every review of a resource.

        Returns:
            Number of reviews removed
        """
        stmt = delete(ReviewModel).where(
            ReviewModel.resource_kind == resource_kind,
            ReviewModel.resource_id == resource_id,
        )
        result = await session.execute(stmt)
        return result.rowcount


review_crud = ReviewCRUD()
