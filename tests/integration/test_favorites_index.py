"""
Test suite for FavoritesIndex.

System role: Verification of per-user favorites and dangling-entry pruning
"""

import uuid

import pytest

from coursehub.application.services import CascadeDeletionEngine, FavoritesIndex
from coursehub.boundary.db.CRUD import course_crud, favorite_crud
from coursehub.core.exceptions import NotFoundError, ValidationError
from coursehub.core.nodes import NodeKind


@pytest.fixture
def favorites(test_async_db) -> FavoritesIndex:
    return FavoritesIndex(test_async_db)


class TestAddRemove:
    """Test suite for add_favorite() and remove_favorite()."""

    @pytest.mark.asyncio
    async def test_add_is_idempotent(
        self, test_async_db, favorites, make_course, student
    ) -> None:
        course = await make_course()

        await favorites.add_favorite(student.id, NodeKind.COURSE, course.id)
        await favorites.add_favorite(student.id, NodeKind.COURSE, course.id)

        assert len(await favorite_crud.get_by_user(test_async_db, student.id)) == 1

    @pytest.mark.asyncio
    async def test_folder_rejected(self, favorites, make_course, make_folder, student) -> None:
        course = await make_course()
        folder = await make_folder(course)

        with pytest.raises(ValidationError):
            await favorites.add_favorite(student.id, NodeKind.FOLDER, folder.id)

    @pytest.mark.asyncio
    async def test_missing_target_rejected(self, favorites, student) -> None:
        with pytest.raises(NotFoundError):
            await favorites.add_favorite(student.id, NodeKind.FILE, uuid.uuid4())

    @pytest.mark.asyncio
    async def test_remove_present_and_absent(self, favorites, make_course, student) -> None:
        course = await make_course()
        await favorites.add_favorite(student.id, NodeKind.COURSE, course.id)

        assert await favorites.remove_favorite(student.id, NodeKind.COURSE, course.id) is True
        assert await favorites.remove_favorite(student.id, NodeKind.COURSE, course.id) is False

    @pytest.mark.asyncio
    async def test_favorites_are_per_user(
        self, favorites, make_course, student, other_student
    ) -> None:
        course = await make_course()
        await favorites.add_favorite(student.id, NodeKind.COURSE, course.id)

        mine = await favorites.list_favorites(student.id)
        theirs = await favorites.list_favorites(other_student.id)

        assert [c.id for c in mine.courses] == [course.id]
        assert theirs.courses == [] and theirs.files == []


class TestListFavorites:
    """Test suite for list_favorites()."""

    @pytest.mark.asyncio
    async def test_resolves_courses_and_files_in_order(
        self, favorites, make_course, make_file, student
    ) -> None:
        first = await make_course("First")
        second = await make_course("Second")
        file = await make_file(first)
        await favorites.add_favorite(student.id, NodeKind.COURSE, second.id)
        await favorites.add_favorite(student.id, NodeKind.FILE, file.id)
        await favorites.add_favorite(student.id, NodeKind.COURSE, first.id)

        result = await favorites.list_favorites(student.id)

        assert [c.name for c in result.courses] == ["Second", "First"]
        assert [f.id for f in result.files] == [file.id]

    @pytest.mark.asyncio
    async def test_dangling_entries_pruned_on_read(
        self, test_async_db, favorites, make_course, student
    ) -> None:
        kept = await make_course("Kept")
        gone = await make_course("Gone")
        await favorites.add_favorite(student.id, NodeKind.COURSE, kept.id)
        await favorites.add_favorite(student.id, NodeKind.COURSE, gone.id)
        # Remove the course row without going through the cascade
        await course_crud.delete_by_id(test_async_db, gone.id)
        await test_async_db.commit()

        result = await favorites.list_favorites(student.id)

        assert [c.id for c in result.courses] == [kept.id]
        entries = await favorite_crud.get_by_user(test_async_db, student.id)
        assert [e.resource_id for e in entries] == [kept.id]

    @pytest.mark.asyncio
    async def test_cascade_clears_favorites(
        self, test_async_db, favorites, blob_store, make_course, make_folder, make_file, student
    ) -> None:
        course = await make_course()
        folder = await make_folder(course)
        file = await make_file(folder)
        await favorites.add_favorite(student.id, NodeKind.FILE, file.id)

        await CascadeDeletionEngine(test_async_db, blob_store).delete_node(
            NodeKind.FOLDER, folder.id
        )

        result = await favorites.list_favorites(student.id)
        assert result.files == []
        assert await favorite_crud.get_by_user(test_async_db, student.id) == []
