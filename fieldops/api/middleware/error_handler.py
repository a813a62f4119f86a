"""
Error handlers mapping domain exceptions to the response envelope.
"""

import traceback
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException

from fieldops.api.schemas.common import ErrorResponse
from fieldops.config.logging import get_logger
from fieldops.config.settings import settings
from fieldops.domain.exceptions.auth_error import AuthenticationError, ForbiddenError
from fieldops.domain.exceptions.conflict_error import ConflictError
from fieldops.domain.exceptions.not_found_error import NotFoundError
from fieldops.domain.exceptions.validation_error import ValidationError
from fieldops.infrastructure.monitoring.metrics import record_error

logger = get_logger(__name__)


def error_response(
    status_code: int, message: str, error: Optional[str] = None
) -> JSONResponse:
    """Render the failure envelope; error detail is dropped outside development."""
    if not settings.expose_error_details:
        error = None
    body = ErrorResponse(message=message, error=error)
    return JSONResponse(
        status_code=status_code, content=body.model_dump(exclude_none=True)
    )


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(item) for item in err.get("loc", ()) if item != "body")
        parts.append(f"{location}: {err.get('msg')}" if location else err.get("msg", ""))
    return "; ".join(parts)


def add_error_handlers(app: FastAPI) -> None:
    """Add custom error handlers to FastAPI app."""

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logger.warning("Validation error", error=str(exc), path=request.url.path)
        return error_response(400, str(exc))

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request, exc: RequestValidationError
    ):
        detail = _format_validation_errors(exc)
        logger.warning("Request validation error", error=detail, path=request.url.path)
        return error_response(400, "Invalid request data", detail)

    @app.exception_handler(AuthenticationError)
    async def authentication_error_handler(request: Request, exc: AuthenticationError):
        logger.info("Authentication failed", error=str(exc), path=request.url.path)
        return error_response(401, str(exc))

    @app.exception_handler(ForbiddenError)
    async def forbidden_error_handler(request: Request, exc: ForbiddenError):
        logger.info("Access denied", error=str(exc), path=request.url.path)
        return error_response(403, str(exc))

    @app.exception_handler(NotFoundError)
    async def not_found_error_handler(request: Request, exc: NotFoundError):
        return error_response(404, str(exc))

    @app.exception_handler(ConflictError)
    async def conflict_error_handler(request: Request, exc: ConflictError):
        logger.info("Conflict", error=str(exc), path=request.url.path)
        return error_response(409, str(exc))

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error("Database error", error=str(exc), path=request.url.path)
        record_error(type(exc).__name__, "database")
        return error_response(500, "A database error occurred", str(exc))

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception",
            error=str(exc),
            path=request.url.path,
            traceback=traceback.format_exc(),
        )
        record_error(type(exc).__name__, "api")
        return error_response(500, "Internal server error", str(exc))
