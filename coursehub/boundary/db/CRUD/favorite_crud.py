"""
Favorite CRUD operations.

Provides set-style add/remove and per-user listing for FavoriteModel.

Dependencies: sqlalchemy, coursehub.boundary.db.models
System role: Favorites persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.boundary.db.models.favorite_model import FavoriteModel
from coursehub.boundary.db.CRUD.base_crud import BaseCRUD
from coursehub.core.nodes import NodeKind


class FavoriteCRUD(BaseCRUD[FavoriteModel]):
    """CRUD operations for FavoriteModel."""

    def __init__(self) -> None:
        """Initialize FavoriteCRUD with FavoriteModel."""
        super().__init__(FavoriteModel)

    async def get_entry(
        self,
        session: AsyncSession,
        user_id: UUID,
        resource_kind: NodeKind,
        resource_id: UUID,
    ) -> FavoriteModel | None:
        stmt = select(FavoriteModel).where(
            FavoriteModel.user_id == user_id,
            FavoriteModel.resource_kind == resource_kind,
            FavoriteModel.resource_id == resource_id,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_user(
        self,
        session: AsyncSession,
        user_id: UUID,
    ) -> Sequence[FavoriteModel]:
        """Retrieve all favorites of a user in the order they were added."""
        stmt = (
            select(FavoriteModel)
            .where(FavoriteModel.user_id == user_id)
            .order_by(FavoriteModel.created_at)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def delete_entry(
        self,
        session: AsyncSession,
        user_id: UUID,
        resource_kind: NodeKind,
        resource_id: UUID,
    ) -> bool:
        """
        Remove one favorite.

        Returns:
            True if a row was removed, False if it was not present
        """
        stmt = delete(FavoriteModel).where(
            FavoriteModel.user_id == user_id,
            FavoriteModel.resource_kind == resource_kind,
            FavoriteModel.resource_id == resource_id,
        )
        result = await session.execute(stmt)
        return result.rowcount > 0

    async def delete_by_resource(
        self,
        session: AsyncSession,
        resource_kind: NodeKind,
        resource_id: UUID,
    ) -> int:
        """
        Prune every user's favorite pointing at a resource.

        Returns:
            Number of favorites removed
        """
        stmt = delete(FavoriteModel).where(
            FavoriteModel.resource_kind == resource_kind,
            FavoriteModel.resource_id == resource_id,
        )
        result = await session.execute(stmt)
        return result.rowcount

    async def delete_many(
        self,
        session: AsyncSession,
        ids: Sequence[UUID],
    ) -> int:
        """Remove favorites by primary key."""
        if not ids:
            return 0
        stmt = delete(FavoriteModel).where(FavoriteModel.id.in_(list(ids)))
        result = await session.execute(stmt)
        return result.rowcount


favorite_crud = FavoriteCRUD()
