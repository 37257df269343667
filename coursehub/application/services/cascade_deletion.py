"""
Cascade deletion engine.

Deletes a node together with its whole subtree: descendant folders,
descendant files (and their blobs), the reviews and favorites of every
deleted Course/File, and the node's entry in its parent's child list.

Traversal is depth-first and post-order with an explicit stack, so deep
folder trees do not hit the recursion limit. Each node is removed in its
own short transaction; nothing holds a lock across the whole cascade.
Already-removed nodes stay removed if a later step fails, and calling
delete_node again on the same root resumes with whatever is left.

Dependencies: sqlalchemy, coursehub.boundary, coursehub.core
System role: Complete and idempotent removal of hierarchy subtrees
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Awaitable
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.application.services.rating_aggregator import RatingAggregator
from coursehub.application.services.reference_maintainer import (
    ReferenceMaintainer,
    child_ids,
)
from coursehub.boundary.blob_store import BlobStore
from coursehub.boundary.db.CRUD import favorite_crud, node_crud, review_crud
from coursehub.boundary.db.models import FileModel
from coursehub.core.exceptions import DependencyError, NotFoundError
from coursehub.core.nodes import NodeKind
from coursehub.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


@dataclass
class CascadeReport:
    """Counts of what one delete_node call removed."""

    courses: int = 0
    folders: int = 0
    files: int = 0
    reviews: int = 0
    favorites: int = 0
    stranded_blob_keys: list[str] = field(default_factory=list)

    def count(self, kind: NodeKind) -> None:
        if kind is NodeKind.COURSE:
            self.courses += 1
        elif kind is NodeKind.FOLDER:
            self.folders += 1
        else:
            self.files += 1


@dataclass
class _Pending:
    kind: NodeKind
    node_id: UUID
    expanded: bool = False


class CascadeDeletionEngine:
    """
    Delete nodes and everything that depends on them.

    Performs no authorization; the caller checks permissions first.
    """

    def __init__(
        self,
        db: AsyncSession,
        blob_store: BlobStore,
        step_timeout: float | None = None,
        maintainer: ReferenceMaintainer | None = None,
        aggregator: RatingAggregator | None = None,
    ) -> None:
        """
        Initialize engine.

        Args:
            db: Async SQLAlchemy session (committed once per removed node)
            blob_store: Client used to release document bytes
            step_timeout: Seconds allowed for removing one node (None = no limit)
            maintainer: ReferenceMaintainer sharing the session (created if None)
            aggregator: RatingAggregator sharing the session (created if None)
        """
        self.db = db
        self._blob_store = blob_store
        self._step_timeout = step_timeout
        self.maintainer = maintainer or ReferenceMaintainer(db)
        self.aggregator = aggregator or RatingAggregator(db)

    async def delete_node(self, kind: NodeKind, node_id: UUID) -> CascadeReport:
        """
        Delete a node and its entire subtree.

        Args:
            kind: Kind of the root node
            node_id: Root node UUID

        Returns:
            CascadeReport: What was removed

        Raises:
            NotFoundError: If the root does not exist (already deleted)
            DependencyError: If the store fails or a step times out; the
                remaining subtree can be deleted by calling again
        """
        root = await node_crud(kind).get_by_id(self.db, node_id)
        if root is None:
            raise NotFoundError(kind.value, node_id)

        logger.info(
            f"Cascade deletion started for {kind.value}",
            extra={"node_id": str(node_id)},
        )

        report = CascadeReport()
        stack = [_Pending(kind, node_id)]
        while stack:
            pending = stack.pop()

            if pending.kind.is_container and not pending.expanded:
                node = await node_crud(pending.kind).get_by_id(self.db, pending.node_id)
                if node is None:
                    continue
                folders, files = child_ids(node)
                stack.append(_Pending(pending.kind, pending.node_id, expanded=True))
                # Popped in order: subfolders first, then files, then the node itself
                stack.extend(_Pending(NodeKind.FILE, UUID(i)) for i in reversed(files))
                stack.extend(_Pending(NodeKind.FOLDER, UUID(i)) for i in reversed(folders))
                continue

            if pending.kind is NodeKind.FILE:
                file = await node_crud(NodeKind.FILE).get_by_id(self.db, pending.node_id)
                if file is None:
                    continue
                await self._release_blob(file, report)

            removed = await self._run_step(
                self._remove_node(pending.kind, pending.node_id, report),
                pending.kind,
                pending.node_id,
            )
            if not removed:
                # Children were attached while we were busy; expand again
                stack.append(_Pending(pending.kind, pending.node_id))

        logger.info(
            f"Cascade deletion finished for {kind.value}",
            extra={
                "node_id": str(node_id),
                "folders": report.folders,
                "files": report.files,
                "reviews": report.reviews,
                "favorites": report.favorites,
                "stranded_blobs": len(report.stranded_blob_keys),
            },
        )
        return report

    async def _remove_node(
        self,
        kind: NodeKind,
        node_id: UUID,
        report: CascadeReport,
    ) -> bool:
        """
        Remove one node whose children are already gone, in one transaction.

        Returns:
            bool: False if the node gained children and must be expanded again
        """
        node = await node_crud(kind).get_by_id(self.db, node_id, for_update=True)
        if node is None:
            await self.db.rollback()
            return True

        if kind.is_container and any(child_ids(node)):
            await self.db.rollback()
            return False

        reviews = favorites = 0
        if kind.is_reviewable:
            reviews = await review_crud.delete_by_resource(self.db, kind, node_id)
            favorites = await favorite_crud.delete_by_resource(self.db, kind, node_id)
        if kind is not NodeKind.COURSE:
            await self.maintainer.detach(node)
        await node_crud(kind).delete_by_id(self.db, node_id)
        if reviews:
            await self.aggregator.recompute(kind, node_id)
        await self.db.commit()

        report.count(kind)
        report.reviews += reviews
        report.favorites += favorites
        logger.debug(
            f"{kind.value} removed",
            extra={"node_id": str(node_id), "reviews": reviews, "favorites": favorites},
        )
        return True

    async def _release_blob(self, file: FileModel, report: CascadeReport) -> None:
        """Delete a file's blob; failures are logged and left for reconciliation."""
        try:
            await asyncio.to_thread(self._blob_store.delete, file.blob_key)
        except Exception as e:
            log_exception_with_context(
                logger,
                "Blob delete failed, continuing cascade",
                e,
                level=logging.WARNING,
                file_id=file.id,
                blob_key=file.blob_key,
            )
            report.stranded_blob_keys.append(file.blob_key)

    async def _run_step(
        self,
        step: Awaitable[bool],
        kind: NodeKind,
        node_id: UUID,
    ) -> bool:
        """Run one per-node transaction under the step timeout."""
        details = {"kind": kind.value, "node_id": str(node_id)}
        try:
            if self._step_timeout is None:
                return await step
            return await asyncio.wait_for(step, timeout=self._step_timeout)
        except asyncio.TimeoutError as e:
            await self.db.rollback()
            logger.error("Cascade deletion step timed out", extra=details)
            raise DependencyError(
                "Cascade deletion timed out; retry to delete the remaining subtree",
                operation="cascade_delete",
                details=details,
            ) from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                "Backing store failed during cascade deletion",
                extra={**details, "error": str(e)},
            )
            raise DependencyError(
                "Backing store failed during cascade deletion; retry to resume",
                operation="cascade_delete",
                details={**details, "error": str(e)},
            ) from e
