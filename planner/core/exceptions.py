"""
Global exception handling for the application.
Every error response shares one envelope: {"error": {code, message, details, path}}.
"""

from http import HTTPStatus
from typing import Any, Dict, Optional

import structlog
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = structlog.get_logger(__name__)


class AppError(Exception):
    """Base class for all application exceptions."""
    code = "AppError"

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationException(AppError):
    """Malformed or missing input the client can correct."""
    code = "ValidationError"

    def __init__(self, message: str = "Invalid request data", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_400_BAD_REQUEST, details)


class UnauthorizedException(AppError):
    """Missing, expired or invalid credentials."""
    code = "Unauthorized"

    def __init__(self, message: str = "Not authenticated", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_401_UNAUTHORIZED, details)


class EntityNotFoundException(AppError):
    """Resource not found, or owned by another user."""
    code = "NotFound"

    def __init__(self, message: str = "Entity not found", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_404_NOT_FOUND, details)


class ConflictException(AppError):
    """Uniqueness violation, e.g. an email that is already registered."""
    code = "Conflict"

    def __init__(self, message: str = "Conflict", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_409_CONFLICT, details)


def _error_body(code: str, message: str, path: str, details: Optional[Dict[str, Any]] = None) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "details": details or {},
            "path": path,
        }
    }


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Render a declared application error."""
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.code, exc.message, request.url.path, exc.details),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render routing errors (unknown path, wrong method) in the shared envelope."""
    try:
        code = HTTPStatus(exc.status_code).phrase.replace(" ", "")
    except ValueError:
        code = "HTTPError"
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(code, str(exc.detail), request.url.path),
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render body/query validation failures as 400 with field-level detail.

    FastAPI parses the JSON body before it resolves dependencies, so a
    protected route re-checks the session here: no session means 401, never 400.
    """
    from planner.interfaces.api.deps import has_valid_session, route_requires_session

    route = request.scope.get("route")
    if route is not None and route_requires_session(route):
        if not await run_in_threadpool(has_valid_session, request):
            return await app_error_handler(request, UnauthorizedException())

    fields = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        fields.append({"field": ".".join(loc) or None, "message": error.get("msg", "Invalid value")})

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body("ValidationError", "Invalid request data", request.url.path, {"fields": fields}),
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all uncaught exceptions globally."""
    if isinstance(exc, AppError):
        return await app_error_handler(request, exc)

    logger.exception("Unhandled error", path=request.url.path, method=request.method)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(
            "InternalServerError",
            "An unexpected error occurred. Please try again later.",
            request.url.path,
        ),
    )


def register_exception_handlers(app) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, global_exception_handler)
