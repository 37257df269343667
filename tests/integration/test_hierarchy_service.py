"""
Test suite for HierarchyService.

Covers ownership/role checks in front of the repository and cascade
engine, and the upload flow's blob cleanup.

System role: Verification of node use case orchestration
"""

import uuid
from unittest.mock import AsyncMock

import pytest

from coursehub.application.services import HierarchyService
from coursehub.boundary.db.CRUD import file_crud
from coursehub.core.exceptions import (
    AuthorizationError,
    DependencyError,
    NotFoundError,
    ValidationError,
)
from coursehub.core.nodes import NodeKind, ParentRef


@pytest.fixture
def service(test_async_db, blob_store) -> HierarchyService:
    return HierarchyService(test_async_db, blob_store)


class TestCreate:
    """Test suite for course and folder creation."""

    @pytest.mark.asyncio
    async def test_admin_creates_course(self, service, admin) -> None:
        course = await service.create_course(admin, {"name": "Compilers", "description": None})

        assert course.admin_id == admin.id

    @pytest.mark.asyncio
    async def test_user_cannot_create_course(self, service, student) -> None:
        with pytest.raises(AuthorizationError):
            await service.create_course(student, {"name": "Compilers"})

    @pytest.mark.asyncio
    async def test_any_user_creates_folder(self, service, make_course, other_student) -> None:
        course = await make_course()

        folder = await service.create_folder(
            other_student, "Past exams", ParentRef(NodeKind.COURSE, course.id)
        )

        assert folder.uploader_id == other_student.id
        assert course.folder_ids == [str(folder.id)]


class TestUpload:
    """Test suite for HierarchyService.upload_file()."""

    @pytest.mark.asyncio
    async def test_upload_stores_blob_then_record(
        self, service, blob_store, make_course, student
    ) -> None:
        course = await make_course()

        file = await service.upload_file(
            student,
            "notes.pdf",
            ParentRef(NodeKind.COURSE, course.id),
            b"%PDF-1.7",
            content_type="application/pdf",
        )

        blob_store.put.assert_called_once()
        data, metadata = blob_store.put.call_args.args
        assert data == b"%PDF-1.7"
        assert metadata["filename"] == "notes.pdf"
        assert file.blob_key.endswith("/notes.pdf")
        assert file.url.endswith(file.blob_key)
        assert file.uploader_id == student.id
        assert course.file_ids == [str(file.id)]

    @pytest.mark.asyncio
    async def test_missing_parent_uploads_nothing(self, service, blob_store, student) -> None:
        with pytest.raises(NotFoundError):
            await service.upload_file(
                student, "a.pdf", ParentRef(NodeKind.FOLDER, uuid.uuid4()), b"x"
            )

        blob_store.put.assert_not_called()

    @pytest.mark.asyncio
    async def test_bad_name_uploads_nothing(self, service, blob_store, make_course, student) -> None:
        course = await make_course()

        with pytest.raises(ValidationError):
            await service.upload_file(
                student, "   ", ParentRef(NodeKind.COURSE, course.id), b"x"
            )

        blob_store.put.assert_not_called()

    @pytest.mark.asyncio
    async def test_record_failure_releases_blob(
        self, test_async_db, service, blob_store, make_course, student
    ) -> None:
        course = await make_course()
        service.repository.create = AsyncMock(
            side_effect=DependencyError("Backing store failed", operation="create_file")
        )

        with pytest.raises(DependencyError):
            await service.upload_file(
                student, "a.pdf", ParentRef(NodeKind.COURSE, course.id), b"x"
            )

        put_key = blob_store.delete.call_args.args[0]
        assert put_key.endswith("/a.pdf")
        blob_store.delete.assert_called_once()
        assert await file_crud.get_all(test_async_db) == []

    @pytest.mark.asyncio
    async def test_failed_cleanup_keeps_original_error(
        self, service, blob_store, make_course, student
    ) -> None:
        course = await make_course()
        service.repository.create = AsyncMock(side_effect=NotFoundError("Course", course.id))
        blob_store.delete.side_effect = DependencyError("Blob delete failed", operation="blob_delete")

        with pytest.raises(NotFoundError):
            await service.upload_file(
                student, "a.pdf", ParentRef(NodeKind.COURSE, course.id), b"x"
            )

        blob_store.delete.assert_called_once()


class TestOwnership:
    """Test suite for update/move/delete permissions."""

    @pytest.mark.asyncio
    async def test_uploader_renames_folder(self, service, make_course, make_folder, student) -> None:
        course = await make_course()
        folder = await make_folder(course, uploader_id=student.id)

        renamed = await service.update_node(student, NodeKind.FOLDER, folder.id, {"name": "Labs"})

        assert renamed.name == "Labs"

    @pytest.mark.asyncio
    async def test_stranger_cannot_update(
        self, service, make_course, make_folder, student, other_student
    ) -> None:
        course = await make_course()
        folder = await make_folder(course, uploader_id=student.id)

        with pytest.raises(AuthorizationError):
            await service.update_node(other_student, NodeKind.FOLDER, folder.id, {"name": "Mine"})

    @pytest.mark.asyncio
    async def test_course_admin_field_is_owner(
        self, service, make_course, admin, student
    ) -> None:
        course = await make_course()

        with pytest.raises(AuthorizationError):
            await service.update_node(student, NodeKind.COURSE, course.id, {"name": "Hijack"})
        updated = await service.update_node(admin, NodeKind.COURSE, course.id, {"name": "Renamed"})

        assert updated.name == "Renamed"

    @pytest.mark.asyncio
    async def test_stranger_cannot_move(
        self, service, make_course, make_file, student, other_student
    ) -> None:
        course = await make_course()
        other = await make_course("Other")
        file = await make_file(course, uploader_id=student.id)

        with pytest.raises(AuthorizationError):
            await service.move_node(
                other_student, NodeKind.FILE, file.id, ParentRef(NodeKind.COURSE, other.id)
            )

    @pytest.mark.asyncio
    async def test_stranger_cannot_delete(
        self, test_async_db, service, blob_store, make_course, make_file, student, other_student
    ) -> None:
        course = await make_course()
        file = await make_file(course, uploader_id=student.id)

        with pytest.raises(AuthorizationError):
            await service.delete_node(other_student, NodeKind.FILE, file.id)

        blob_store.delete.assert_not_called()
        assert await file_crud.get_by_id(test_async_db, file.id) is not None

    @pytest.mark.asyncio
    async def test_admin_deletes_any_file(
        self, test_async_db, service, make_course, make_file, admin, student
    ) -> None:
        course = await make_course()
        file = await make_file(course, uploader_id=student.id)

        report = await service.delete_node(admin, NodeKind.FILE, file.id)

        assert report.files == 1
        assert course.file_ids == []

    @pytest.mark.asyncio
    async def test_delete_missing_node(self, service, admin) -> None:
        with pytest.raises(NotFoundError):
            await service.delete_node(admin, NodeKind.COURSE, uuid.uuid4())
