"""
Request handlers for creating, fetching and updating user records.

Each user lives in the blob store as ``<id>.json``. The handlers are
transport-agnostic: they take an ``ApiRequest`` and always return an
``ApiResponse``, with every error mapped to a status code and a
``{"error": ...}`` body at the entry point.
"""

from __future__ import annotations

import base64
import logging
from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional

from fastapi.concurrency import run_in_threadpool

from user_api.codec import build_user, dumps, encode_user, parse_body, user_key
from user_api.dependencies import generate_user_id
from user_api.errors import BadRequest, HTTPError, NotFound
from user_api.storage import BlobStore

logger = logging.getLogger(__name__)

USER_ID_PARAM = "id"
GENERIC_ERROR_MESSAGE = "Internal server error"
JSON_HEADERS = {"Content-Type": "application/json"}


@dataclass
class ApiRequest:
    path_parameters: Optional[Mapping[str, str]] = None
    body: str | bytes | None = None

    @classmethod
    def from_event(cls, event: Mapping) -> "ApiRequest":
        """Build a request from an API Gateway proxy event."""
        body = event.get("body")
        if body is not None and event.get("isBase64Encoded"):
            try:
                body = base64.b64decode(body, validate=True)
            except ValueError as e:
                raise BadRequest("Invalid base64 body") from e
        return cls(path_parameters=event.get("pathParameters"), body=body)


@dataclass
class ApiResponse:
    status_code: int
    body: str
    headers: dict = field(default_factory=lambda: dict(JSON_HEADERS))

    def to_event(self) -> dict:
        return {
            "statusCode": self.status_code,
            "headers": dict(self.headers),
            "body": self.body,
        }


def get_user_id(request: ApiRequest) -> str:
    user_id = (request.path_parameters or {}).get(USER_ID_PARAM)
    if not user_id:
        raise BadRequest("Missing UUID")
    return user_id


async def validate_user_exists(store: BlobStore, user_id: str) -> None:
    """
    Raise NotFound unless ``<user_id>.json`` is present. Uses a metadata-only
    check; any other storage failure propagates to the caller.
    """
    if not await run_in_threadpool(store.exists, user_key(user_id)):
        raise NotFound("user not found")


async def upsert_user(
    store: BlobStore, user_id: str, body: str | bytes | None
) -> dict:
    user = build_user(user_id, parse_body(body))
    await run_in_threadpool(store.put_bytes, user_key(user_id), encode_user(user))
    return user


def error_response(exc: BaseException) -> ApiResponse:
    """Map any error to a response. Never raises."""
    if isinstance(exc, HTTPError):
        logger.info("Request failed with %s: %s", exc.status_code, exc.message)
        return ApiResponse(status_code=exc.status_code, body=dumps({"error": exc.message}))

    logger.error("Unexpected error handling user request", exc_info=exc)
    try:
        message = str(exc) or GENERIC_ERROR_MESSAGE
    except Exception:
        message = GENERIC_ERROR_MESSAGE
    return ApiResponse(status_code=500, body=dumps({"error": message}))


async def fetch_user(request: ApiRequest, *, store: BlobStore) -> ApiResponse:
    try:
        user_id = get_user_id(request)
        await validate_user_exists(store, user_id)
        raw = await run_in_threadpool(store.get_bytes, user_key(user_id))
        # Stored bytes are returned as-is, without re-encoding.
        return ApiResponse(status_code=200, body=raw.decode("utf-8"))
    except Exception as e:
        return error_response(e)


async def create_user(
    request: ApiRequest,
    *,
    store: BlobStore,
    generate_id: Callable[[], str] = generate_user_id,
) -> ApiResponse:
    try:
        user_id = generate_id()
        user = await upsert_user(store, user_id, request.body)
        logger.info("Created user %s", user_id)
        return ApiResponse(status_code=201, body=dumps(user))
    except Exception as e:
        return error_response(e)


async def update_user(request: ApiRequest, *, store: BlobStore) -> ApiResponse:
    """
    Replace an existing user in full. Concurrent updates are last-writer-wins.
    """
    try:
        user_id = get_user_id(request)
        await validate_user_exists(store, user_id)
        user = await upsert_user(store, user_id, request.body)
        logger.info("Updated user %s", user_id)
        return ApiResponse(status_code=200, body=dumps(user))
    except Exception as e:
        return error_response(e)
