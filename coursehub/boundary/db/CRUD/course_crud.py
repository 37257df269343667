"""
Course CRUD operations.

Provides Create, Read, Update, Delete operations for CourseModel
with course-specific listing queries.

Dependencies: sqlalchemy, coursehub.boundary.db.models
System role: Course persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.boundary.db.models.course_model import CourseModel
from coursehub.boundary.db.CRUD.base_crud import BaseCRUD


class CourseCRUD(BaseCRUD[CourseModel]):
    """
    CRUD operations for CourseModel.

    Extends BaseCRUD with featured-course listing.
    """

    def __init__(self) -> None:
        """Initialize CourseCRUD with CourseModel."""
        super().__init__(CourseModel)

    async def get_featured(
        self,
        session: AsyncSession,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[CourseModel]:
        """
        Retrieve featured courses, oldest first.

        Args:
            session: Async database session
            limit: Maximum number of courses to return
            offset: Number of courses to skip

        Returns:
            Sequence of featured CourseModels
        """
        stmt = (
            select(CourseModel)
            .where(CourseModel.is_featured.is_(True))
            .order_by(CourseModel.created_at)
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()


course_crud = CourseCRUD()
