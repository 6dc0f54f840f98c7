"""
Global exception handlers and custom exception classes.
"""
from typing import Any, Dict, List, Optional
from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from sqlalchemy.exc import SQLAlchemyError
import logging

# Set up logging
logger = logging.getLogger(__name__)

INTERNAL_ERROR_DETAIL = "Internal server error"


class AppException(Exception):
    """
    Base exception class for application-specific exceptions.
    """
    def __init__(self, status_code: int, detail: str):
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail


class ValidationException(AppException):
    """Exception raised when a field is missing or holds an invalid value."""
    def __init__(self, detail: str = "Validation error", errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=detail)
        self.errors = errors or []


class ResourceNotFoundException(AppException):
    """Exception raised when an id does not resolve to a record."""
    def __init__(self, detail: str = "Resource not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class ConflictException(AppException):
    """Exception raised when a write collides with the current state (occupied bed, duplicate key)."""
    def __init__(self, detail: str = "Conflict with current state"):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class InternalServerException(AppException):
    """Exception raised when the storage layer fails."""
    def __init__(self, detail: str = INTERNAL_ERROR_DETAIL):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


def _is_production(request: Request) -> bool:
    settings = getattr(request.app.state, "settings", None)
    return bool(settings and settings.is_production)


async def app_exception_handler(request: Request, exc: AppException):
    """
    Handler for application-specific exceptions.

    Args:
        request: The request that caused the exception
        exc: The exception instance

    Returns:
        JSONResponse: Standardized error response
    """
    detail = exc.detail
    if exc.status_code >= 500:
        logger.error(f"Application error: {exc.detail}")
        if _is_production(request):
            detail = INTERNAL_ERROR_DETAIL
    else:
        logger.warning(f"Request rejected ({exc.status_code}): {exc.detail}")

    content = {"detail": detail}
    if isinstance(exc, ValidationException) and exc.errors:
        content["errors"] = exc.errors
    return JSONResponse(status_code=exc.status_code, content=content)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Handler for request validation exceptions.

    Args:
        request: The request that caused the exception
        exc: The validation exception instance

    Returns:
        JSONResponse: Standardized error response with validation details
    """
    logger.error(f"Validation error: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=jsonable_encoder({
            "detail": "Validation error",
            "errors": exc.errors()
        })
    )


async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError):
    """Handler for storage errors that escaped the service layer."""
    logger.exception(f"Database error on {request.method} {request.url.path}")
    detail = INTERNAL_ERROR_DETAIL if _is_production(request) else str(exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": detail}
    )


# Register exception handlers with FastAPI app
def register_exception_handlers(app):
    """
    Register all exception handlers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
