"""
Blob store port.

The resource store only needs to put document bytes and release them
again; any client exposing these two calls can be injected.

Dependencies: typing (stdlib)
System role: Contract between the cascade engine/upload flow and blob storage
"""

from dataclasses import dataclass
from typing import Mapping, Protocol


@dataclass(frozen=True)
class StoredBlob:
    """Location of an uploaded blob."""

    url: str
    key: str


class BlobStore(Protocol):
    """Minimal blob storage interface."""

    def put(self, data: bytes, metadata: Mapping[str, str]) -> StoredBlob:
        """Store bytes and return their URL and key."""
        ...

    def delete(self, key: str) -> None:
        """
        Release a stored blob.

        Deleting a key that is already absent succeeds. Other failures raise
        DependencyError.
        """
        ...
