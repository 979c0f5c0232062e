"""
Dependency wiring shared by the FastAPI app and the Lambda entry points.
"""

from __future__ import annotations

import logging
import uuid
from typing import Callable

from user_api.config import get_settings
from user_api.storage import BlobStore, InMemoryBlobStore, S3BlobStore

logger = logging.getLogger(__name__)

_blob_store: BlobStore | None = None


def generate_user_id() -> str:
    return str(uuid.uuid4())


def get_id_generator() -> Callable[[], str]:
    return generate_user_id


def get_blob_store() -> BlobStore:
    """
    Return a process-wide blob store so warm Lambda containers reuse the client.
    """
    global _blob_store
    if _blob_store is not None:
        return _blob_store

    settings = get_settings()
    if settings.use_in_memory_backends or not settings.users_bucket:
        logger.info("Using in-memory blob store")
        _blob_store = InMemoryBlobStore()
    else:
        _blob_store = S3BlobStore(
            bucket=settings.users_bucket,
            region=settings.s3_region,
            endpoint=settings.s3_endpoint,
            access_key_id=settings.aws_access_key_id,
            secret_access_key=settings.aws_secret_access_key,
            addressing_style=settings.s3_addressing_style,
        )
    return _blob_store


def reset_blob_store() -> None:
    global _blob_store
    _blob_store = None
