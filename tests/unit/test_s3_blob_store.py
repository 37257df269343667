"""
Test suite for S3BlobStore.

Uses a mocked boto3 client; no network access.

System role: Verification of blob put/delete semantics
"""

from unittest.mock import MagicMock
from urllib.parse import unquote

import boto3
import pytest
from botocore.exceptions import ClientError, ParamValidationError
from botocore.stub import ANY, Stubber

from coursehub.boundary.aws import S3BlobStore
from coursehub.core.exceptions import DependencyError


def _client_error(code: str, operation: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


@pytest.fixture
def s3_client() -> MagicMock:
    return MagicMock()


@pytest.fixture
def store(s3_client: MagicMock) -> S3BlobStore:
    return S3BlobStore(
        bucket="test-bucket",
        region="ap-southeast-2",
        key_prefix="documents/",
        s3_client=s3_client,
    )


class TestPut:
    """Test suite for S3BlobStore.put()."""

    def test_put_uploads_under_prefixed_key(self, store: S3BlobStore, s3_client: MagicMock) -> None:
        # Act
        blob = store.put(b"%PDF", {"filename": "notes.pdf", "content_type": "application/pdf"})

        # Assert
        assert blob.key.startswith("documents/")
        assert blob.key.endswith("/notes.pdf")
        assert blob.url == f"https://test-bucket.s3.ap-southeast-2.amazonaws.com/{blob.key}"
        kwargs = s3_client.put_object.call_args.kwargs
        assert kwargs["Bucket"] == "test-bucket"
        assert kwargs["Key"] == blob.key
        assert kwargs["ContentType"] == "application/pdf"
        assert "content_type" not in kwargs["Metadata"]

    def test_put_uses_public_base_url(self, s3_client: MagicMock) -> None:
        store = S3BlobStore(
            bucket="b",
            public_base_url="https://cdn.example/",
            s3_client=s3_client,
        )

        blob = store.put(b"x", {"filename": "a.txt"})

        assert blob.url == f"https://cdn.example/{blob.key}"

    def test_put_failure_raises_dependency_error(
        self, store: S3BlobStore, s3_client: MagicMock
    ) -> None:
        s3_client.put_object.side_effect = _client_error("InternalError", "PutObject")

        with pytest.raises(DependencyError, match="Blob upload failed"):
            store.put(b"x", {"filename": "a.txt"})

    def test_put_non_ascii_filename_passes_client_validation(self) -> None:
        client = boto3.client(
            "s3",
            region_name="ap-southeast-2",
            aws_access_key_id="testing",
            aws_secret_access_key="testing",
        )
        store = S3BlobStore(bucket="test-bucket", s3_client=client)
        stubber = Stubber(client)
        stubber.add_response(
            "put_object",
            {},
            {
                "Bucket": "test-bucket",
                "Key": ANY,
                "Body": ANY,
                "ContentType": "application/pdf",
                "Metadata": ANY,
            },
        )

        with stubber:
            blob = store.put(
                b"data",
                {"filename": "סיכום.pdf", "content_type": "application/pdf", "uploader_id": "u1"},
            )

        stubber.assert_no_pending_responses()
        assert blob.key.endswith("/סיכום.pdf")

    def test_put_metadata_is_ascii_and_decodable(
        self, store: S3BlobStore, s3_client: MagicMock
    ) -> None:
        store.put(b"x", {"filename": "résumé notes.pdf", "uploader_id": "u1"})

        metadata = s3_client.put_object.call_args.kwargs["Metadata"]
        assert all(value.isascii() for value in metadata.values())
        assert unquote(metadata["filename"]) == "résumé notes.pdf"
        assert metadata["uploader_id"] == "u1"

    def test_rejected_parameters_are_not_retryable(
        self, store: S3BlobStore, s3_client: MagicMock
    ) -> None:
        s3_client.put_object.side_effect = ParamValidationError(report="bad metadata")

        with pytest.raises(DependencyError, match="Blob upload rejected") as exc_info:
            store.put(b"x", {"filename": "a.txt"})

        assert exc_info.value.retryable is False


class TestDelete:
    """Test suite for S3BlobStore.delete()."""

    def test_delete_calls_s3(self, store: S3BlobStore, s3_client: MagicMock) -> None:
        store.delete("documents/k/a.txt")

        s3_client.delete_object.assert_called_once_with(
            Bucket="test-bucket", Key="documents/k/a.txt"
        )

    @pytest.mark.parametrize("code", ["404", "NoSuchKey", "NotFound"])
    def test_missing_key_counts_as_deleted(
        self, store: S3BlobStore, s3_client: MagicMock, code: str
    ) -> None:
        s3_client.delete_object.side_effect = _client_error(code, "DeleteObject")

        store.delete("documents/gone")

    def test_other_failures_raise(self, store: S3BlobStore, s3_client: MagicMock) -> None:
        s3_client.delete_object.side_effect = _client_error("AccessDenied", "DeleteObject")

        with pytest.raises(DependencyError) as exc_info:
            store.delete("documents/k")

        assert exc_info.value.retryable is True
        assert exc_info.value.details["operation"] == "blob_delete"
