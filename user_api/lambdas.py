"""
AWS Lambda entry points for API Gateway proxy integrations.

Configure the functions as ``user_api.lambdas.post_user``,
``user_api.lambdas.get_user`` and ``user_api.lambdas.put_user``; the
``{id}`` path parameter carries the user identifier.
"""

from __future__ import annotations

import asyncio
import logging

from user_api.config import get_settings
from user_api.dependencies import get_blob_store
from user_api.errors import HTTPError
from user_api.handlers import (
    ApiRequest,
    create_user,
    error_response,
    fetch_user,
    update_user,
)

logger = logging.getLogger()
logger.setLevel(get_settings().log_level)


def _invoke(handler, event) -> dict:
    try:
        request = ApiRequest.from_event(event)
    except HTTPError as e:
        return error_response(e).to_event()
    return asyncio.run(handler(request, store=get_blob_store())).to_event()


def get_user(event, context=None) -> dict:
    return _invoke(fetch_user, event)


def post_user(event, context=None) -> dict:
    return _invoke(create_user, event)


def put_user(event, context=None) -> dict:
    return _invoke(update_user, event)
