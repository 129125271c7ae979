"""
Exception handlers for FastAPI application.

Every error leaves the service in one envelope:

    {"error": true, "code": ..., "message": ..., "details": ..., "status_code": ...}
"""

import logging
from typing import Any

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from app.core.domain import (
    ConflictException,
    DomainException,
    EntityNotFoundException,
    ValidationException,
)

logger = logging.getLogger(__name__)

# Checked in order, first match wins
DOMAIN_STATUS_CODES: tuple[tuple[type[DomainException], int], ...] = (
    (ValidationException, status.HTTP_400_BAD_REQUEST),
    (EntityNotFoundException, status.HTTP_404_NOT_FOUND),
    (ConflictException, status.HTTP_409_CONFLICT),
)


def error_response(
    status_code: int,
    message: Any,
    code: str | None = None,
    details: Any = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build the standard error envelope."""
    content: dict[str, Any] = {"error": True, "message": message, "status_code": status_code}
    if code is not None:
        content["code"] = code
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def domain_status_code(exc: DomainException) -> int:
    """Map a domain exception to its HTTP status code."""
    for exc_type, status_code in DOMAIN_STATUS_CODES:
        if isinstance(exc, exc_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def _field_errors(errors) -> list[dict[str, Any]]:
    return [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in errors
    ]


async def domain_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Client errors raised by use cases: 400, 404 or 409 depending on family."""
    if not isinstance(exc, DomainException):
        return await global_exception_handler(request, exc)

    status_code = domain_status_code(exc)
    logger.warning(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    return error_response(status_code, exc.message, code=exc.code, details=exc.details)


async def integrity_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Constraint violations that slipped past use-case checks.

    Two concurrent creates with the same rule name both pass the duplicate
    lookup; the unique constraint rejects the second one at flush time.
    """
    logger.warning(f"Integrity error on {request.method} {request.url.path}: {exc!s}")
    return error_response(
        status.HTTP_409_CONFLICT,
        "Request conflicts with existing data",
        code="CONFLICT",
    )


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    http_exc = exc if isinstance(exc, HTTPException) else HTTPException(status_code=500, detail=str(exc))
    return error_response(http_exc.status_code, http_exc.detail, headers=http_exc.headers)


async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Request body, path or query failed schema validation."""
    errors = _field_errors(exc.errors()) if isinstance(exc, RequestValidationError) else str(exc)
    logger.warning(f"Validation error on {request.url.path}: {errors}")
    return error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "Validation error",
        code="REQUEST_VALIDATION_ERROR",
        details=errors,
    )


async def pydantic_validation_handler(request: Request, exc: Exception) -> JSONResponse:
    """Pydantic errors raised while building responses or domain objects."""
    errors = _field_errors(exc.errors()) if isinstance(exc, ValidationError) else str(exc)
    logger.warning(f"Pydantic validation error: {errors}")
    return error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "Data validation error",
        code="DATA_VALIDATION_ERROR",
        details=errors,
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle all unhandled exceptions.

    Logs the full exception with traceback and returns a safe error response.
    """
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc!s}",
        exc_info=True,
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error", code="INTERNAL_ERROR")


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ValidationError, pydantic_validation_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    logger.info("Exception handlers registered")
