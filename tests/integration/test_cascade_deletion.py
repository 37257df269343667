"""
Test suite for CascadeDeletionEngine.

Covers subtree completeness, blob release, review/favorite cleanup,
idempotence, tolerated blob failures, resumption after a failed step
and step timeouts.

System role: Verification of cascading removal
"""

import asyncio
import uuid
from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy.exc import OperationalError

from coursehub.application.services import (
    CascadeDeletionEngine,
    FavoritesIndex,
    ReviewService,
)
from coursehub.boundary.db.CRUD import (
    course_crud,
    favorite_crud,
    file_crud,
    folder_crud,
    review_crud,
)
from coursehub.core.exceptions import DependencyError, NotFoundError
from coursehub.core.nodes import NodeKind


@pytest.fixture
def engine(test_async_db, blob_store) -> CascadeDeletionEngine:
    return CascadeDeletionEngine(test_async_db, blob_store)


@pytest.fixture
async def tree(make_course, make_folder, make_file):
    """
    Course
    ├── Week 1
    │   ├── Slides
    │   │   └── deck.pdf
    │   └── w1.pdf
    ├── Week 2
    └── syllabus.pdf
    """
    course = await make_course()
    week_1 = await make_folder(course, "Week 1")
    slides = await make_folder(week_1, "Slides")
    deck = await make_file(slides, "deck.pdf")
    w1 = await make_file(week_1, "w1.pdf")
    week_2 = await make_folder(course, "Week 2")
    syllabus = await make_file(course, "syllabus.pdf")
    return {
        "course": course,
        "week_1": week_1,
        "slides": slides,
        "week_2": week_2,
        "deck": deck,
        "w1": w1,
        "syllabus": syllabus,
    }


async def _counts(db) -> tuple[int, int, int]:
    return (
        len(await course_crud.get_all(db)),
        len(await folder_crud.get_all(db)),
        len(await file_crud.get_all(db)),
    )


class TestSubtreeRemoval:
    """Test suite for CascadeDeletionEngine.delete_node()."""

    @pytest.mark.asyncio
    async def test_course_delete_removes_everything(
        self, test_async_db, engine, blob_store, tree
    ) -> None:
        blob_keys = {tree[name].blob_key for name in ("deck", "w1", "syllabus")}

        report = await engine.delete_node(NodeKind.COURSE, tree["course"].id)

        assert await _counts(test_async_db) == (0, 0, 0)
        assert (report.courses, report.folders, report.files) == (1, 3, 3)
        deleted_keys = [c.args[0] for c in blob_store.delete.call_args_list]
        assert sorted(deleted_keys) == sorted(blob_keys)
        assert report.stranded_blob_keys == []

    @pytest.mark.asyncio
    async def test_folder_delete_keeps_siblings(
        self, test_async_db, engine, blob_store, tree
    ) -> None:
        course = tree["course"]

        report = await engine.delete_node(NodeKind.FOLDER, tree["week_1"].id)

        assert (report.folders, report.files) == (2, 2)
        assert await _counts(test_async_db) == (1, 1, 1)
        course = await course_crud.get_by_id(test_async_db, course.id)
        assert course.folder_ids == [str(tree["week_2"].id)]
        assert course.file_ids == [str(tree["syllabus"].id)]
        assert blob_store.delete.call_count == 2

    @pytest.mark.asyncio
    async def test_file_delete_detaches_from_parent(self, test_async_db, engine, tree) -> None:
        await engine.delete_node(NodeKind.FILE, tree["deck"].id)

        slides = await folder_crud.get_by_id(test_async_db, tree["slides"].id)
        assert slides.file_ids == []
        assert await file_crud.get_by_id(test_async_db, tree["deck"].id) is None

    @pytest.mark.asyncio
    async def test_empty_folder_delete(self, test_async_db, engine, blob_store, tree) -> None:
        report = await engine.delete_node(NodeKind.FOLDER, tree["week_2"].id)

        assert (report.folders, report.files) == (1, 0)
        blob_store.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_children_attached_mid_cascade_are_deleted(
        self, test_async_db, engine, blob_store, make_file, tree
    ) -> None:
        week_2_id = tree["week_2"].id
        remove_node = engine._remove_node
        late = {}

        async def _attach_then_remove(kind, node_id, report) -> bool:
            if node_id == week_2_id and not late:
                folder = await folder_crud.get_by_id(test_async_db, week_2_id)
                file = await make_file(folder, "late.pdf")
                late.update(id=file.id, blob_key=file.blob_key)
            return await remove_node(kind, node_id, report)

        engine._remove_node = _attach_then_remove

        report = await engine.delete_node(NodeKind.FOLDER, week_2_id)

        assert (report.folders, report.files) == (1, 1)
        assert await folder_crud.get_by_id(test_async_db, week_2_id) is None
        assert await file_crud.get_by_id(test_async_db, late["id"]) is None
        blob_store.delete.assert_called_once_with(late["blob_key"])

    @pytest.mark.asyncio
    async def test_reviews_and_favorites_removed(
        self, test_async_db, engine, tree, student, other_student
    ) -> None:
        reviews = ReviewService(test_async_db)
        favorites = FavoritesIndex(test_async_db)
        await reviews.add_review(student, NodeKind.FILE, tree["deck"].id, 5)
        await reviews.add_review(other_student, NodeKind.FILE, tree["deck"].id, 3)
        await reviews.add_review(student, NodeKind.COURSE, tree["course"].id, 4)
        await favorites.add_favorite(student.id, NodeKind.FILE, tree["deck"].id)
        await favorites.add_favorite(student.id, NodeKind.COURSE, tree["course"].id)

        report = await engine.delete_node(NodeKind.COURSE, tree["course"].id)

        assert report.reviews == 3
        assert report.favorites == 2
        assert await review_crud.get_all(test_async_db) == []
        assert await favorite_crud.get_by_user(test_async_db, student.id) == []


class TestIdempotence:
    """Test suite for repeated and interrupted deletions."""

    @pytest.mark.asyncio
    async def test_second_delete_reports_not_found(self, engine, tree) -> None:
        course_id = tree["course"].id
        await engine.delete_node(NodeKind.COURSE, course_id)

        with pytest.raises(NotFoundError):
            await engine.delete_node(NodeKind.COURSE, course_id)

    @pytest.mark.asyncio
    async def test_missing_root_raises(self, engine) -> None:
        with pytest.raises(NotFoundError, match="Folder not found"):
            await engine.delete_node(NodeKind.FOLDER, uuid.uuid4())

    @pytest.mark.asyncio
    async def test_retry_resumes_after_store_failure(
        self, test_async_db, engine, tree
    ) -> None:
        course_id = tree["course"].id
        failing = AsyncMock(
            side_effect=[0, OperationalError("DELETE FROM favorites", {}, Exception("lost"))]
        )

        # Second file removal fails; the first one stays removed
        with patch.object(favorite_crud, "delete_by_resource", failing):
            with pytest.raises(DependencyError) as exc_info:
                await engine.delete_node(NodeKind.COURSE, course_id)

        assert exc_info.value.retryable is True
        assert len(await file_crud.get_all(test_async_db)) == 2

        await engine.delete_node(NodeKind.COURSE, course_id)

        assert await _counts(test_async_db) == (0, 0, 0)


class TestBlobFailures:
    """Test suite for blob store failures during cascade."""

    @pytest.mark.asyncio
    async def test_blob_failure_is_tolerated_and_reported(
        self, test_async_db, engine, blob_store, tree
    ) -> None:
        deck_key = tree["deck"].blob_key

        def _delete(key):
            if key == deck_key:
                raise DependencyError("Blob delete failed", operation="blob_delete")

        blob_store.delete.side_effect = _delete

        report = await engine.delete_node(NodeKind.COURSE, tree["course"].id)

        assert await _counts(test_async_db) == (0, 0, 0)
        assert report.stranded_blob_keys == [deck_key]


class TestTimeouts:
    """Test suite for the per-step timeout."""

    @pytest.mark.asyncio
    async def test_slow_step_raises_dependency_error(
        self, test_async_db, blob_store, tree
    ) -> None:
        engine = CascadeDeletionEngine(test_async_db, blob_store, step_timeout=0.01)
        file_id = tree["syllabus"].id

        async def _slow_remove(*args, **kwargs) -> bool:
            await asyncio.sleep(1)
            return True

        engine._remove_node = _slow_remove

        with pytest.raises(DependencyError, match="timed out"):
            await engine.delete_node(NodeKind.FILE, file_id)

        assert await file_crud.get_by_id(test_async_db, file_id) is not None
