"""Exception handlers for the explorer FastAPI application.

This module converts Python exceptions into consistent, user-friendly JSON
responses.
"""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from models.exceptions import NotAFileError, PathNotFoundError

logger = logging.getLogger(__name__)


# Exception Handlers
# These convert exceptions into JSON responses


async def path_not_found_handler(request: Request, exc: PathNotFoundError):
    """Handle PathNotFoundError exceptions.

    Returns a 404 naming the path that did not resolve.

    Args:
        request: The incoming request that triggered the error.
        exc: The PathNotFoundError exception.

    Returns:
        JSONResponse with 404 status and the offending path.
    """
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={
            "error": "Path Not Found",
            "detail": str(exc),
            "path": exc.path,
        },
    )


async def not_a_file_handler(request: Request, exc: NotAFileError):
    """Handle NotAFileError exceptions.

    Returns a 400 when a file operation was pointed at a directory.

    Args:
        request: The incoming request that triggered the error.
        exc: The NotAFileError exception.

    Returns:
        JSONResponse with 400 status and the offending path.
    """
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Not A File",
            "detail": str(exc),
            "path": exc.path,
        },
    )


async def validation_exception_handler(request: Request, exc: ValidationError):
    """Handle an action or snapshot that does not match its model.

    Only the location, message and error type of each problem are returned;
    raw inputs and validator context are left out of the body.

    Args:
        request: The incoming request that triggered the error.
        exc: The ValidationError exception.

    Returns:
        JSONResponse with 422 status and one entry per invalid field.
    """
    errors = exc.errors(include_url=False, include_context=False, include_input=False)
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "Validation Error",
            "detail": f"Invalid {exc.title} data ({len(errors)} problem(s))",
            "endpoint": request.url.path,
            "validation_errors": errors,
        },
    )


async def value_error_handler(request: Request, exc: ValueError):
    """Handle a bad argument that is not tied to an explorer path."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Invalid Value",
            "detail": str(exc),
            "endpoint": request.url.path,
        },
    )


async def runtime_error_handler(request: Request, exc: RuntimeError):
    """Handle RuntimeError exceptions.

    In practice this is the explorer session being used before the app
    started or after it shut down.

    Args:
        request: The incoming request that triggered the error.
        exc: The RuntimeError exception.

    Returns:
        JSONResponse with 500 status and the error message.
    """
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Runtime Error",
            "detail": str(exc),
            "endpoint": request.url.path,
        },
    )


async def generic_exception_handler(request: Request, exc: Exception):
    """Handle any unhandled exceptions.

    The traceback is logged; clients only get the exception type and the
    request that failed.

    Args:
        request: The incoming request that triggered the error.
        exc: The exception that was raised.

    Returns:
        JSONResponse with 500 status.
    """
    logger.exception(f"Unhandled error in {request.method} {request.url.path}: {exc}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal Server Error",
            "detail": f"The explorer failed to handle {request.method} {request.url.path}",
            "type": type(exc).__name__,
        },
    )
