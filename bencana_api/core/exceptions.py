"""
Global exception handling for the application.
Every failure leaves the API in the same envelope:
{"error": {"code", "message", "details", "path"}}.
"""

from typing import Any, Dict, Iterable, List, Optional

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = structlog.get_logger(__name__)


class AppError(Exception):
    """Base class for all application exceptions."""
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


class ValidationFailure(AppError):
    """Request input failed one or more field rules."""
    def __init__(
        self,
        errors: List[Dict[str, str]],
        message: str = "Validation failed",
        status_code: int = 422,
    ):
        self.errors = errors
        super().__init__(message, status_code, {"errors": errors})


def violations(errors: Iterable[Dict[str, Any]]) -> List[Dict[str, str]]:
    """Pydantic error dicts as {field, message}; the body/path/query prefix is dropped."""
    result = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ())]
        if loc and loc[0] in ("body", "path", "query", "header"):
            loc = loc[1:]
        if err.get("type") == "json_invalid":
            loc = []  # loc holds a character offset, not a field
        result.append({"field": ".".join(loc) or "body", "message": err.get("msg", "Invalid value")})
    return result


class EntityNotFoundException(AppError):
    """Resource not found error."""
    def __init__(self, message: str = "Entity not found", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_404_NOT_FOUND, details)


class ConflictException(AppError):
    """Unique key already taken."""
    def __init__(self, message: str = "Conflict", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_409_CONFLICT, details)


class UnauthorizedException(AppError):
    """Authentication failure error."""
    def __init__(self, message: str = "Unauthorized", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_401_UNAUTHORIZED, details)


class ForbiddenException(AppError):
    """Authorization failure error."""
    def __init__(self, message: str = "Forbidden", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_403_FORBIDDEN, details)


class StoreFailure(AppError):
    """The database rejected or could not run a statement."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_500_INTERNAL_SERVER_ERROR, details)


def _error_response(request: Request, status_code: int, code: str, message: str, details=None) -> JSONResponse:
    body: Dict[str, Any] = {
        "code": code,
        "message": message,
        "path": request.url.path,
    }
    if details is not None:
        body["details"] = details
    return JSONResponse(status_code=status_code, content={"error": body})


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("Request failed", code=exc.__class__.__name__, error=exc.message)
    return _error_response(
        request, exc.status_code, exc.__class__.__name__, exc.message, exc.details
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Map FastAPI's own parameter validation onto the field/message list."""
    errors = violations(exc.errors())
    return _error_response(
        request,
        422,
        "ValidationFailure",
        "Validation failed",
        {"errors": errors},
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all uncaught exceptions globally."""
    logger.exception("Unexpected error occurred", path=request.url.path)
    return _error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "InternalServerError",
        "An unexpected error occurred. Please try again later.",
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, global_exception_handler)
