"""
HTTP routes dispatching to the user handlers.
"""

from __future__ import annotations

from typing import Callable

from fastapi import APIRouter, Depends, Request, Response

from user_api.dependencies import get_blob_store, get_id_generator
from user_api.handlers import (
    ApiRequest,
    ApiResponse,
    USER_ID_PARAM,
    create_user,
    fetch_user,
    update_user,
)
from user_api.schemas import (
    ERROR_RESPONSES,
    NOT_FOUND_RESPONSE,
    HealthResponse,
    UserRecord,
)
from user_api.storage import BlobStore

router = APIRouter()


def _to_response(result: ApiResponse) -> Response:
    return Response(
        content=result.body,
        status_code=result.status_code,
        headers=result.headers,
    )


@router.post(
    "/users",
    status_code=201,
    response_model=UserRecord,
    responses=ERROR_RESPONSES,
)
async def post_user(
    request: Request,
    store: BlobStore = Depends(get_blob_store),
    generate_id: Callable[[], str] = Depends(get_id_generator),
):
    """Create a user from an arbitrary JSON object under a fresh id."""
    body = await request.body()
    result = await create_user(
        ApiRequest(body=body), store=store, generate_id=generate_id
    )
    return _to_response(result)


@router.get(
    "/users/{user_id}",
    response_model=UserRecord,
    responses={**ERROR_RESPONSES, **NOT_FOUND_RESPONSE},
)
async def get_user(user_id: str, store: BlobStore = Depends(get_blob_store)):
    result = await fetch_user(
        ApiRequest(path_parameters={USER_ID_PARAM: user_id}), store=store
    )
    return _to_response(result)


@router.put(
    "/users/{user_id}",
    response_model=UserRecord,
    responses={**ERROR_RESPONSES, **NOT_FOUND_RESPONSE},
)
async def put_user(
    user_id: str,
    request: Request,
    store: BlobStore = Depends(get_blob_store),
):
    """Replace an existing user in full."""
    body = await request.body()
    result = await update_user(
        ApiRequest(path_parameters={USER_ID_PARAM: user_id}, body=body),
        store=store,
    )
    return _to_response(result)


@router.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok")
