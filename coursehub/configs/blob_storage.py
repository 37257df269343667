"""
Blob storage configuration.

Settings for the bucket holding raw document bytes.

Dependencies: pydantic_settings
System role: Blob store configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BlobStorageSettings(BaseSettings):
    """Settings for the document blob bucket."""

    model_config = SettingsConfigDict(
        env_prefix="BLOB_STORAGE_",
        case_sensitive=False,
        extra="ignore",
    )

    bucket: str = Field(
        default="coursehub-dev-documents",
        description="S3 bucket for raw document storage",
    )
    region: str = Field(
        default="ap-southeast-2",
        description="AWS region for S3 bucket",
    )
    key_prefix: str = Field(
        default="documents/",
        description="Prefix prepended to every generated object key",
    )
    public_base_url: str | None = Field(
        default=None,
        description="Base URL for document links (defaults to the bucket's S3 URL)",
    )
