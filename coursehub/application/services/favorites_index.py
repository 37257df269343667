"""
Favorites index.

Per-user sets of favorite Courses and Files. Entries are weak references:
listing resolves each one and drops, then prunes, those whose target is
gone. Cascade deletion also prunes eagerly.

Dependencies: sqlalchemy, coursehub.boundary.db, coursehub.core
System role: Favorites use case orchestration
"""

import logging
from dataclasses import dataclass, field
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.application.services.transaction import unit_of_work
from coursehub.boundary.db.CRUD import course_crud, favorite_crud, file_crud, node_crud
from coursehub.boundary.db.models import CourseModel, FileModel
from coursehub.core.exceptions import ConflictError, DependencyError, NotFoundError
from coursehub.core.nodes import NodeKind, ensure_reviewable

logger = logging.getLogger(__name__)


@dataclass
class Favorites:
    """Resolved favorites of one user, in the order they were added."""

    courses: list[CourseModel] = field(default_factory=list)
    files: list[FileModel] = field(default_factory=list)


class FavoritesIndex:
    """Per-user favorite Courses and Files."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize favorites index with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def add_favorite(self, user_id: UUID, kind: NodeKind, resource_id: UUID) -> None:
        """
        Add a favorite. Adding an existing favorite has no effect.

        Raises:
            ValidationError: If kind is Folder
            NotFoundError: If the resource does not exist
        """
        ensure_reviewable(kind)
        if not await node_crud(kind).exists(self.db, resource_id):
            raise NotFoundError(kind.value, resource_id)
        if await favorite_crud.get_entry(self.db, user_id, kind, resource_id) is not None:
            return

        # A concurrent add of the same entry hits the unique constraint; same outcome
        try:
            async with unit_of_work(self.db, "add_favorite", "Already a favorite"):
                await favorite_crud.create(
                    self.db,
                    user_id=user_id,
                    resource_kind=kind,
                    resource_id=resource_id,
                )
        except ConflictError:
            logger.debug("Favorite added concurrently", extra={"resource_id": str(resource_id)})
            return

        logger.info(
            "Favorite added",
            extra={"user_id": str(user_id), "resource_kind": kind.value, "resource_id": str(resource_id)},
        )

    async def remove_favorite(self, user_id: UUID, kind: NodeKind, resource_id: UUID) -> bool:
        """
        Remove a favorite. Removing an absent favorite has no effect.

        Returns:
            bool: True if an entry was removed
        """
        ensure_reviewable(kind)
        async with unit_of_work(self.db, "remove_favorite"):
            removed = await favorite_crud.delete_entry(self.db, user_id, kind, resource_id)
        if removed:
            logger.info(
                "Favorite removed",
                extra={"user_id": str(user_id), "resource_kind": kind.value, "resource_id": str(resource_id)},
            )
        return removed

    async def list_favorites(self, user_id: UUID) -> Favorites:
        """
        Resolve a user's favorites, skipping and pruning dangling entries.

        Returns:
            Favorites: Live courses and files
        """
        entries = await favorite_crud.get_by_user(self.db, user_id)
        course_ids = [e.resource_id for e in entries if e.resource_kind is NodeKind.COURSE]
        file_ids = [e.resource_id for e in entries if e.resource_kind is NodeKind.FILE]
        courses = {c.id: c for c in await course_crud.get_many(self.db, course_ids)}
        files = {f.id: f for f in await file_crud.get_many(self.db, file_ids)}

        dangling = [
            e.id
            for e in entries
            if e.resource_id not in (courses if e.resource_kind is NodeKind.COURSE else files)
        ]
        if dangling:
            await self._prune(user_id, dangling)

        return Favorites(
            courses=[courses[i] for i in course_ids if i in courses],
            files=[files[i] for i in file_ids if i in files],
        )

    async def _prune(self, user_id: UUID, favorite_ids: list[UUID]) -> None:
        """Delete dangling entries; a failure here never fails the read."""
        try:
            async with unit_of_work(self.db, "prune_favorites"):
                await favorite_crud.delete_many(self.db, favorite_ids)
        except DependencyError as e:
            logger.warning(
                "Pruning dangling favorites failed",
                extra={"user_id": str(user_id), "error": str(e)},
            )
            return
        logger.info(
            "Dangling favorites pruned",
            extra={"user_id": str(user_id), "count": len(favorite_ids)},
        )
