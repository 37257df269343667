"""
Database models package.

Exports:
  - CourseModel: Root of a hierarchy
  - FolderModel: Inner hierarchy node
  - FileModel: Document leaf node
  - ReviewModel: Rating/comment on a Course or File
  - FavoriteModel: Per-user weak reference to a Course or File

Dependencies: sqlalchemy, coursehub.boundary.db.base
System role: Database model definitions for domain entities
"""

from coursehub.boundary.db.models.course_model import CourseModel
from coursehub.boundary.db.models.folder_model import FolderModel
from coursehub.boundary.db.models.file_model import FileModel
from coursehub.boundary.db.models.review_model import ReviewModel
from coursehub.boundary.db.models.favorite_model import FavoriteModel

__all__ = [
    "CourseModel",
    "FolderModel",
    "FileModel",
    "ReviewModel",
    "FavoriteModel",
]
