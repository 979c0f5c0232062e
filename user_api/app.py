"""
FastAPI application entry point for the user records API.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI

from user_api.config import get_settings
from user_api.routes import router


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    app = FastAPI(title="User Records API", version="0.1.0")
    app.include_router(router, prefix=settings.api_prefix)
    return app


app = create_app()
