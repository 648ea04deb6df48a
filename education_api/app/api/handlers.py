"""
Exception handlers shared by all API versions.

Services raise the errors from ``core.exceptions`` and let them
propagate; the handlers below turn them into JSON responses of the form
``{"timestamp", "message", "details", "status_code"}``.  Request body
validation failures are reported as a mapping of field name to message
instead.
"""

import logging
from datetime import datetime
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..core.exceptions import EducationError

logger = logging.getLogger(__name__)


def _error_body(request: Request, message: str, status_code: int) -> Dict[str, Any]:
    return {
        "timestamp": datetime.now().isoformat(),
        "message": message,
        "details": f"uri={request.url.path}",
        "status_code": status_code,
    }


async def education_error_handler(request: Request, exc: EducationError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(request, str(exc), exc.status_code),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Map each invalid field to its first violation message.

    Nested fields are joined with dots (``college.id``), batch items are
    prefixed with their index (``0.name``).
    """
    errors: Dict[str, str] = {}
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ()) if part != "body") or "body"
        cause = (error.get("ctx") or {}).get("error")
        message = str(cause) if isinstance(cause, ValueError) else error.get("msg", "Invalid value")
        errors.setdefault(field, message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=errors)


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(request, "An unexpected error occurred", status.HTTP_500_INTERNAL_SERVER_ERROR),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(EducationError, education_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
