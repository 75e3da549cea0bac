"""Exception handlers that render every API error as ``{"error": ...}``.

The site's front end reads a single ``error`` string from failed responses,
so FastAPI's default ``{"detail": ...}`` bodies are replaced here.
Request validation failures become 400 rather than 422, and anything
unhandled becomes a 500 with ``error`` and ``details``.
"""

from collections.abc import Sequence
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from dopamine_roi.observability import get_logger

logger = get_logger(__name__)

_VALUE_ERROR_PREFIX = "Value error, "


def describe_validation_errors(errors: Sequence[Any]) -> str:
    """Turn pydantic validation errors into one human-readable message.

    Only the first error is reported.

    Args:
        errors: ``RequestValidationError.errors()`` output.

    Returns:
        Message such as ``"email is required"`` or ``"Invalid email format"``.
    """
    if not errors:
        return "Invalid request"

    first = errors[0]
    error_type = first.get("type", "")
    location = [str(part) for part in first.get("loc", ()) if part != "body"]
    field = ".".join(location)

    if error_type == "json_invalid":
        return "Malformed JSON body"
    if error_type == "missing":
        return f"{field} is required" if field else "Request body is required"

    message = str(first.get("msg", "Invalid value"))
    if error_type == "value_error":
        return message.removeprefix(_VALUE_ERROR_PREFIX)
    return f"{field}: {message}" if field else message


def internal_error_response(exc: Exception) -> JSONResponse:
    """Build the 500 body used by handlers that catch unexpected errors.

    Args:
        exc: The exception that aborted the request.

    Returns:
        JSONResponse with ``error`` and the exception class name as ``details``.
    """
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error", "details": type(exc).__name__},
    )


async def _validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    message = describe_validation_errors(exc.errors())
    logger.info("Request rejected", path=request.url.path, reason=message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


async def _http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error",
        path=request.url.path,
        error_type=type(exc).__name__,
        exc_info=exc,
    )
    return internal_error_response(exc)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the ``{"error": ...}`` handlers on an application."""
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
