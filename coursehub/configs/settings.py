"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from coursehub.configs.base import BaseSettings
from coursehub.configs.blob_storage import BlobStorageSettings
from coursehub.configs.cascade import CascadeSettings
from coursehub.configs.database import DatabaseSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    database: DatabaseSettings = DatabaseSettings()
    blob_storage: BlobStorageSettings = BlobStorageSettings()
    cascade: CascadeSettings = CascadeSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from coursehub.configs import get_settings
        settings = get_settings()
    """
    return Settings()
