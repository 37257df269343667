"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: coursehub.configs, coursehub.application, coursehub.boundary
System role: DI container for service injection
"""

from functools import lru_cache
from uuid import UUID

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.application.services import (
    FavoritesIndex,
    HierarchyService,
    ReviewService,
)
from coursehub.boundary.aws import S3BlobStore
from coursehub.boundary.blob_store import BlobStore
from coursehub.boundary.db import get_async_db
from coursehub.configs import Settings, get_settings
from coursehub.core.authorization import ActingUser, Role


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


@lru_cache
def get_blob_store() -> BlobStore:
    """
    Get cached S3 blob store.

    boto3 clients are thread-safe, so one instance serves every request.
    """
    settings = get_settings()
    return S3BlobStore(
        bucket=settings.blob_storage.bucket,
        region=settings.blob_storage.region,
        key_prefix=settings.blob_storage.key_prefix,
        public_base_url=settings.blob_storage.public_base_url,
    )


def get_acting_user(
    x_user_id: str | None = Header(default=None),
    x_user_role: str = Header(default=Role.USER.value),
) -> ActingUser:
    """
    Build the acting identity from gateway headers.

    The gateway authenticates the caller and forwards X-User-Id and
    X-User-Role.

    Raises:
        HTTPException(401): Missing or malformed user ID
        HTTPException(400): Unknown role
    """
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing X-User-Id header",
        )
    try:
        user_id = UUID(x_user_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Malformed X-User-Id header",
        )
    try:
        role = Role(x_user_role.lower())
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown role: {x_user_role}",
        )
    return ActingUser(id=user_id, role=role)


def get_hierarchy_service(
    db: AsyncSession = Depends(get_async_db),
    blob_store: BlobStore = Depends(get_blob_store),
    settings: Settings = Depends(get_settings_dependency),
) -> HierarchyService:
    """
    Get hierarchy service instance.

    Args:
        db: Async database session (injected via Depends)
        blob_store: Cached blob store (injected via Depends)
        settings: Application settings (injected via Depends)

    Returns:
        HierarchyService: Service for course, folder and file operations
    """
    return HierarchyService(
        db,
        blob_store,
        step_timeout=settings.cascade.step_timeout_seconds,
    )


def get_review_service(db: AsyncSession = Depends(get_async_db)) -> ReviewService:
    """Get review service instance."""
    return ReviewService(db)


def get_favorites_index(db: AsyncSession = Depends(get_async_db)) -> FavoritesIndex:
    """Get favorites index instance."""
    return FavoritesIndex(db)
