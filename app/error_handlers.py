"""Centralized error handlers.

Malformed request input becomes a 400; storage failures become a generic 500
with the cause logged server-side only.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register error handlers on the FastAPI app."""

    @app.exception_handler(RequestValidationError)
    async def invalid_request(request: Request, exc: RequestValidationError):  # type: ignore[no-redef]
        logger.warning(f"Invalid request to {request.url.path}: {exc.errors()}")
        return PlainTextResponse("Invalid request", status_code=400)

    @app.exception_handler(SQLAlchemyError)
    async def storage_error(request: Request, exc: SQLAlchemyError):  # type: ignore[no-redef]
        logger.error(
            f"Database error while handling {request.method} {request.url.path}",
            exc_info=exc,
        )
        return PlainTextResponse("Internal Server Error", status_code=500)
