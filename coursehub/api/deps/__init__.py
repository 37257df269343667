"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_acting_user,
    get_blob_store,
    get_favorites_index,
    get_hierarchy_service,
    get_review_service,
    get_settings_dependency,
)

__all__ = [
    "get_acting_user",
    "get_blob_store",
    "get_favorites_index",
    "get_hierarchy_service",
    "get_review_service",
    "get_settings_dependency",
]
