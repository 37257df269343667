"""
S3 client for the document bucket.

Stores uploaded document bytes and deletes them when their File record
goes away.

Dependencies: boto3
System role: Blob store implementation backed by S3
"""

import logging
import uuid
from typing import Mapping
from urllib.parse import quote

import boto3
from botocore.exceptions import BotoCoreError, ClientError, ParamValidationError

from coursehub.boundary.blob_store import StoredBlob
from coursehub.core.exceptions import DependencyError

logger = logging.getLogger(__name__)

_MISSING_KEY_CODES = {"404", "NoSuchKey", "NotFound"}


def _ascii_metadata(metadata: Mapping[str, str]) -> dict[str, str]:
    """S3 user metadata must be ASCII; values are percent-encoded as UTF-8."""
    return {k: quote(str(v), safe=" .-_") for k, v in metadata.items() if k != "content_type"}


class S3BlobStore:
    """S3 client for document bucket operations."""

    def __init__(
        self,
        bucket: str,
        region: str = "ap-southeast-2",
        key_prefix: str = "documents/",
        public_base_url: str | None = None,
        s3_client=None,
    ) -> None:
        """
        Initialize S3 client for document bucket.

        Args:
            bucket: S3 bucket name for document storage
            region: AWS region for S3 bucket
            key_prefix: Prefix for generated object keys
            public_base_url: Base URL for links (defaults to the bucket URL)
            s3_client: Pre-built boto3 client (created if None)
        """
        self._bucket = bucket
        self._region = region
        self._key_prefix = key_prefix
        self._public_base_url = (
            public_base_url or f"https://{bucket}.s3.{region}.amazonaws.com"
        ).rstrip("/")
        self._s3_client = s3_client or boto3.client("s3", region_name=region)

    def put(self, data: bytes, metadata: Mapping[str, str]) -> StoredBlob:
        """
        Upload document bytes under a fresh key.

        Args:
            data: Raw document bytes
            metadata: Object metadata; "filename" and "content_type" are used

        Returns:
            StoredBlob: Public URL and object key

        Raises:
            DependencyError: If the upload fails
        """
        filename = metadata.get("filename", "document")
        key = f"{self._key_prefix}{uuid.uuid4()}/{filename}"
        try:
            self._s3_client.put_object(
                Bucket=self._bucket,
                Key=key,
                Body=data,
                ContentType=metadata.get("content_type", "application/octet-stream"),
                Metadata=_ascii_metadata(metadata),
            )
        except ParamValidationError as e:
            raise DependencyError(
                "Blob upload rejected",
                operation="blob_put",
                retryable=False,
                details={"key": key, "error": str(e)},
            ) from e
        except (ClientError, BotoCoreError) as e:
            raise DependencyError(
                "Blob upload failed",
                operation="blob_put",
                details={"key": key, "error": str(e)},
            ) from e

        logger.info("Blob stored", extra={"blob_key": key, "size": len(data)})
        return StoredBlob(url=f"{self._public_base_url}/{key}", key=key)

    def delete(self, key: str) -> None:
        """
        Delete a blob, treating an absent key as already deleted.

        Args:
            key: S3 object key

        Raises:
            DependencyError: If S3 reports any other failure
        """
        try:
            self._s3_client.delete_object(Bucket=self._bucket, Key=key)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in _MISSING_KEY_CODES:
                logger.debug("Blob already absent", extra={"blob_key": key})
                return
            raise DependencyError(
                "Blob delete failed",
                operation="blob_delete",
                details={"key": key, "error": str(e)},
            ) from e
        except BotoCoreError as e:
            raise DependencyError(
                "Blob delete failed",
                operation="blob_delete",
                details={"key": key, "error": str(e)},
            ) from e

