"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Connection management
  - CourseModel, FolderModel, FileModel, ReviewModel, FavoriteModel: Domain entities
  - course_crud, folder_crud, file_crud, review_crud, favorite_crud: CRUD singletons

Dependencies: sqlalchemy, coursehub.configs
System role: Database adapter providing persistent storage for the
course hierarchy, reviews and favorites.
"""

from coursehub.boundary.db.base import Base, TimestampMixin, UUIDMixin
from coursehub.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from coursehub.boundary.db.models import (
    CourseModel,
    FavoriteModel,
    FileModel,
    FolderModel,
    ReviewModel,
)
from coursehub.boundary.db.CRUD import (
    BaseCRUD,
    CourseCRUD,
    FolderCRUD,
    FileCRUD,
    ReviewCRUD,
    FavoriteCRUD,
    course_crud,
    folder_crud,
    file_crud,
    review_crud,
    favorite_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "CourseModel",
    "FolderModel",
    "FileModel",
    "ReviewModel",
    "FavoriteModel",
    # CRUD classes
    "BaseCRUD",
    "CourseCRUD",
    "FolderCRUD",
    "FileCRUD",
    "ReviewCRUD",
    "FavoriteCRUD",
    # CRUD singletons
    "course_crud",
    "folder_crud",
    "file_crud",
    "review_crud",
    "favorite_crud",
]
