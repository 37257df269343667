"""
Response mapping utilities.

Transforms ORM models and cascade reports into Pydantic response models.
Centralizes response construction logic for the hierarchy routers.

Dependencies: coursehub.models
System role: Hierarchy response transformation
"""

from typing import Sequence

from coursehub.application.services import CascadeReport
from coursehub.boundary.db.models import CourseModel, FileModel, FolderModel
from coursehub.models.course import CourseResponse
from coursehub.models.file import FileResponse
from coursehub.models.folder import ContentsResponse, FolderResponse
from coursehub.models.node import DeleteResponse


def map_course_to_response(course: CourseModel) -> CourseResponse:
    return CourseResponse.model_validate(course)


def map_courses_to_response(courses: Sequence[CourseModel]) -> list[CourseResponse]:
    return [map_course_to_response(course) for course in courses]


def map_folder_to_response(folder: FolderModel) -> FolderResponse:
    return FolderResponse.model_validate(folder)


def map_file_to_response(file: FileModel) -> FileResponse:
    return FileResponse.model_validate(file)


def map_contents_to_response(
    folders: Sequence[FolderModel],
    files: Sequence[FileModel],
) -> ContentsResponse:
    """
    Build the combined child listing of a course or folder.

    Args:
        folders: Child folders in list order
        files: Child files in list order

    Returns:
        ContentsResponse: Folders first, then files
    """
    return ContentsResponse(
        folders=[map_folder_to_response(f) for f in folders],
        files=[map_file_to_response(f) for f in files],
    )


def map_report_to_response(report: CascadeReport) -> DeleteResponse:
    return DeleteResponse(
        courses=report.courses,
        folders=report.folders,
        files=report.files,
        reviews=report.reviews,
        favorites=report.favorites,
        stranded_blob_keys=report.stranded_blob_keys,
    )
