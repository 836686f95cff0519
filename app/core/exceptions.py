# /app/core/exceptions.py

"""
Application error types and the FastAPI handlers that turn them into the
`{"error": ..., "details": ...}` JSON bodies the frontend expects.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from . import config

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base error carrying the HTTP status and the user-facing message."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: Optional[int] = None, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details


class RequestValidationFailed(AppError):
    status_code = status.HTTP_400_BAD_REQUEST


class AIConfigurationError(AppError):
    """Raised when the generative backend has no credentials configured."""


class GenerationError(AppError):
    """Raised when the text path of the generative backend fails."""


class SessionNotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


def error_body(message: str, details: Optional[str] = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"error": message}
    # Upstream error text is only exposed outside production.
    if details and config.is_development():
        body["details"] = details
    return body


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message, exc.details))


# Endpoints whose contract is a static 400 message instead of the 422 detail list.
REQUIRED_FIELD_MESSAGES = {
    "/api/chat": "Message and sessionId are required",
    "/api/upload": "File and sessionId are required",
}


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = REQUIRED_FIELD_MESSAGES.get(request.url.path.rstrip("/"))
    if message is None:
        return await request_validation_exception_handler(request, exc)
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error_body(message))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
