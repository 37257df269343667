"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from coursehub.boundary.db.CRUD import course_crud, folder_crud

    # Use singleton instances
    course = await course_crud.get_by_id(db, course_id)

    # Or instantiate classes directly for custom behavior
    from coursehub.boundary.db.CRUD import FolderCRUD
    custom_crud = FolderCRUD()
"""

from coursehub.boundary.db.CRUD.base_crud import BaseCRUD
from coursehub.boundary.db.CRUD.course_crud import CourseCRUD, course_crud
from coursehub.boundary.db.CRUD.folder_crud import FolderCRUD, folder_crud
from coursehub.boundary.db.CRUD.file_crud import FileCRUD, file_crud
from coursehub.boundary.db.CRUD.review_crud import ReviewCRUD, review_crud
from coursehub.boundary.db.CRUD.favorite_crud import FavoriteCRUD, favorite_crud

__all__ = [
    "BaseCRUD",
    "CourseCRUD",
    "course_crud",
    "FolderCRUD",
    "folder_crud",
    "FileCRUD",
    "file_crud",
    "ReviewCRUD",
    "review_crud",
    "FavoriteCRUD",
    "favorite_crud",
]

from coursehub.core.nodes import NodeKind

_NODE_CRUDS: dict[NodeKind, BaseCRUD] = {
    NodeKind.COURSE: course_crud,
    NodeKind.FOLDER: folder_crud,
    NodeKind.FILE: file_crud,
}


def node_crud(kind: NodeKind) -> BaseCRUD:
    """Return the CRUD singleton storing nodes of the given kind."""
    return _NODE_CRUDS[kind]


__all__.append("node_crud")
