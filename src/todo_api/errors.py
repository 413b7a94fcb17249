from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"
REQUEST_VALIDATION_MESSAGE = "Request validation failed"


class AppError(Exception):
    """Base class for errors that carry their own HTTP status code."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(AppError):
    """Input violates a domain rule (400)."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(AppError):
    """Referenced entity does not exist (404)."""

    status_code = status.HTTP_404_NOT_FOUND


# PUBLIC_INTERFACE
def error_body(message: str, status_code: int) -> Dict[str, Any]:
    """
    Build the uniform error envelope.

    Response format:
        {"error": {"message": "...", "statusCode": 404}}
    """
    return {"error": {"message": message, "statusCode": status_code}}


def error_response(message: str, status_code: int, headers: Dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=error_body(message, status_code), headers=headers)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    logger.info("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc.message)
    return error_response(exc.message, exc.status_code)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Schema failures on body, path or query are reported as 400 with the uniform envelope.
    The individual violations are logged rather than returned.
    """
    logger.info("Request validation failed on %s %s: %s", request.method, request.url.path, exc.errors())
    return error_response(REQUEST_VALIDATION_MESSAGE, status.HTTP_400_BAD_REQUEST)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    headers = getattr(exc, "headers", None)
    return error_response(str(exc.detail), exc.status_code, headers=headers)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(INTERNAL_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)


# PUBLIC_INTERFACE
def register_exception_handlers(app: FastAPI) -> None:
    """Attach the centralized handlers mapping error kind to status code and envelope."""
    app.add_exception_handler(AppError, app_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)
