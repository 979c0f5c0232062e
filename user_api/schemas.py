"""
Pydantic schemas documenting the API responses.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict


class UserRecord(BaseModel):
    """Arbitrary JSON object; only ``id`` is reserved."""

    model_config = ConfigDict(extra="allow")

    id: str


class ErrorBody(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: Literal["ok"]


ERROR_RESPONSES = {
    400: {"model": ErrorBody, "description": "Missing id or invalid body"},
    500: {"model": ErrorBody, "description": "Storage or internal failure"},
}
NOT_FOUND_RESPONSE = {404: {"model": ErrorBody, "description": "User not found"}}
