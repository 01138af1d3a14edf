"""Exception handlers rendering every failure as ``{success: false, error}``."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskboard.models import ErrorResponse

logger = logging.getLogger(__name__)

# Checked in this order; the first offending field decides the message.
FIELD_MESSAGES = {
    "title": "Title is required and must be a string",
    "status": "Invalid status",
    "priority": "Invalid priority",
    "description": "Description must be a string",
}
INVALID_BODY = "Invalid request body"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


def validation_message(exc: RequestValidationError) -> str:
    """Pick the message for the most important invalid field."""
    fields = set()
    for error in exc.errors():
        loc = error.get("loc", ())
        if len(loc) >= 2 and loc[0] == "body":
            fields.add(loc[1])
    for name, message in FIELD_MESSAGES.items():
        if name in fields:
            return message
    return INVALID_BODY


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, validation_message(exc))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s: %s", request.method, request.url.path, exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
