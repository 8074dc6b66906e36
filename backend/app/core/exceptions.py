"""HTTP error helpers and exception handlers.

Every error leaves the API as JSON with a ``message`` key. ``HTTPException``
with a string detail becomes ``{"message": detail}``; a dict detail is sent
as-is. Request validation failures are reshaped into
``{"message": ..., "errors": {field: [messages]}}``.
"""

import logging
from typing import Dict, List

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

VALIDATION_FAILED_MESSAGE = "Validation failed."

ErrorBag = Dict[str, List[str]]

_LOCATION_PREFIXES = {"body", "query", "path", "header"}


def validation_error(errors: ErrorBag, message: str = VALIDATION_FAILED_MESSAGE) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail={"message": message, "errors": errors},
    )


def internal_error(message: str, exc: Exception) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={"message": message, "error": str(exc)},
    )


def add_error(errors: ErrorBag, field: str, message: str) -> None:
    errors.setdefault(field, []).append(message)


def _field_name(loc) -> str:
    parts = [str(part) for part in loc]
    if len(parts) > 1 and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(parts)


def format_validation_errors(raw_errors) -> ErrorBag:
    errors: ErrorBag = {}
    for err in raw_errors:
        add_error(errors, _field_name(err.get("loc", ())), err.get("msg", "Invalid value"))
    return errors


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if isinstance(exc.detail, dict):
        content = exc.detail
    else:
        content = {"message": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"message": VALIDATION_FAILED_MESSAGE, "errors": format_validation_errors(exc.errors())},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error", "error": str(exc)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
