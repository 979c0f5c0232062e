"""
Blob storage abstraction for S3-compatible buckets and in-memory testing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError

MISSING_OBJECT_CODES = ("404", "NotFound", "NoSuchKey")


class BlobStore(Protocol):
    """Defines the operations the user handlers need from object storage."""

    def exists(self, key: str) -> bool:
        ...

    def get_bytes(self, key: str) -> bytes:
        ...

    def put_bytes(self, key: str, body: bytes) -> None:
        ...


@dataclass
class InMemoryBlobStore:
    """Test double for storage interactions."""

    stored_objects: dict[str, bytes] = field(default_factory=dict)

    def exists(self, key: str) -> bool:
        return key in self.stored_objects

    def get_bytes(self, key: str) -> bytes:
        # Raises KeyError for missing keys, like a failed GetObject would.
        return self.stored_objects[key]

    def put_bytes(self, key: str, body: bytes) -> None:
        self.stored_objects[key] = bytes(body)

    def reset(self) -> None:
        self.stored_objects.clear()


@dataclass
class S3BlobStore:
    """
    Blob store backed by an S3 bucket (or any S3-compatible endpoint).
    """

    bucket: str
    region: Optional[str] = None
    endpoint: Optional[str] = None
    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = None
    addressing_style: str = "auto"

    def __post_init__(self):
        config = Config(
            s3={"addressing_style": self.addressing_style},
            signature_version="s3v4",
        )
        # Empty strings mean "use the default credential chain / endpoint".
        self._client = boto3.client(
            "s3",
            endpoint_url=self.endpoint or None,
            region_name=self.region or None,
            aws_access_key_id=self.access_key_id or None,
            aws_secret_access_key=self.secret_access_key or None,
            config=config,
        )

    def exists(self, key: str) -> bool:
        try:
            self._client.head_object(Bucket=self.bucket, Key=key)
        except ClientError as e:
            code = str(e.response.get("Error", {}).get("Code", ""))
            if code in MISSING_OBJECT_CODES:
                return False
            raise
        return True

    def get_bytes(self, key: str) -> bytes:
        response = self._client.get_object(Bucket=self.bucket, Key=key)
        return response["Body"].read()

    def put_bytes(self, key: str, body: bytes) -> None:
        self._client.put_object(
            Bucket=self.bucket,
            Key=key,
            Body=body,
            ContentType="application/json",
        )
