"""
Application errors that map directly onto HTTP responses.
"""

from __future__ import annotations


class HTTPError(Exception):
    """An error carrying the status code it should be reported with."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class BadRequest(HTTPError):
    status_code = 400


class NotFound(HTTPError):
    status_code = 404
