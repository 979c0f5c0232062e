"""
Encoding helpers for user records stored as JSON blobs.
"""

from __future__ import annotations

import json
import re
from typing import Any

from user_api.errors import BadRequest

USER_KEY_SUFFIX = ".json"
USER_ID_FIELD = "id"
LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def user_key(user_id: str) -> str:
    return f"{user_id}{USER_KEY_SUFFIX}"


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def dumps(value: Any) -> str:
    # Compact separators keep stored blobs identical to what JS clients write.
    text = json.dumps(
        value, separators=(",", ":"), ensure_ascii=False, allow_nan=False
    )
    # Lone surrogates cannot be encoded as UTF-8; escape them as JSON.stringify does.
    return LONE_SURROGATE.sub(lambda m: f"\\u{ord(m.group()):04x}", text)


def encode_user(user: dict) -> bytes:
    return dumps(user).encode("utf-8")


def parse_body(body: str | bytes | None) -> dict:
    """
    Parse a request body into a dict. A missing or blank body is an empty
    record; anything that is not a JSON object is rejected.
    """
    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise BadRequest("Invalid JSON body") from e
    if not body or not body.strip():
        return {}
    try:
        parsed = json.loads(body, parse_constant=_reject_constant)
    except ValueError as e:
        raise BadRequest("Invalid JSON body") from e
    if not isinstance(parsed, dict):
        raise BadRequest("Request body must be a JSON object")
    return parsed


def build_user(user_id: str, fields: dict) -> dict:
    user = dict(fields)
    user[USER_ID_FIELD] = user_id
    return user
