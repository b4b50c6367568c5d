"""
Exception handlers for the FastAPI application.

Converts application exceptions to JSON responses with a consistent
``{"error": {"code", "message", "details"}}`` shape.
"""

import logging
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ptcoach.exceptions import AuthenticationError, PTCoachError, StorageFailure

logger = logging.getLogger(__name__)


def create_error_response(
    status_code: int,
    code: str,
    message: str,
    details: Dict[str, Any] | None = None,
) -> JSONResponse:
    """Create a standardized error response."""
    content: Dict[str, Any] = {
        "error": {
            "code": code,
            "message": message,
        }
    }
    if details:
        content["error"]["details"] = details
    return JSONResponse(status_code=status_code, content=content)


async def ptcoach_error_handler(
    request: Request,
    exc: PTCoachError,
) -> JSONResponse:
    """Handle all PTCoachError exceptions."""
    if isinstance(exc, StorageFailure):
        logger.error(
            "Storage failure on %s %s: %s",
            request.method,
            request.url.path,
            exc.message,
            exc_info=exc.__cause__,
        )
    response = create_error_response(
        status_code=exc.status_code,
        code=exc.code.value,
        message=exc.message,
        details=exc.details if exc.details else None,
    )
    if isinstance(exc, AuthenticationError):
        response.headers["WWW-Authenticate"] = "Bearer"
    return response


def register_exception_handlers(app: FastAPI) -> None:
    """Register the application exception handlers on ``app``."""
    app.add_exception_handler(PTCoachError, ptcoach_error_handler)
