"""Error Handlers — global exception handlers for the TimeInCity API.

Invariants:
    - Every error response uses the same {"error": {code, message, category, severity}}
      envelope, whether raised by core, by FastAPI validation or by routing
    - TimeInCityError → its own code and http_status
    - RequestValidationError → 400 VALIDATION_ERROR with field-level details
    - Unmatched route / method (Starlette HTTPException) → enveloped with its status
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Client-caused failures (4xx) logged at INFO/WARNING, server faults at ERROR:
      unknown slugs and typo'd URLs are routine traffic for a public city directory
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from timeincity.core.errors import ErrorCategory, ErrorSeverity, TimeInCityError

logger = logging.getLogger(__name__)

_HTTP_STATUS_CODES = {
    status.HTTP_404_NOT_FOUND: ("NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND),
    status.HTTP_405_METHOD_NOT_ALLOWED: ("METHOD_NOT_ALLOWED", ErrorCategory.VALIDATION),
}


def _envelope(
    code: str, message: str, category: ErrorCategory, severity: ErrorSeverity,
    **extra,
) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            **extra,
        },
    }


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(TimeInCityError, _handle_domain_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, _handle_http_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)


async def _handle_domain_error(request: Request, exc: TimeInCityError) -> JSONResponse:
    level = logging.INFO if exc.http_status < 500 else logging.ERROR
    logger.log(
        level,
        f"{exc.code} on {request.url.path}: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def _handle_validation_error(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    details = [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]
    logger.warning(
        f"Rejected request to {request.url.path}: {len(details)} invalid field(s)",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            "VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, details=details,
        ),
    )


async def _handle_http_error(
    request: Request, exc: StarletteHTTPException,
) -> JSONResponse:
    code, category = _HTTP_STATUS_CODES.get(
        exc.status_code, ("HTTP_ERROR", ErrorCategory.VALIDATION),
    )
    logger.info(
        f"{code} on {request.method} {request.url.path}",
        extra={"error_code": code, "path": request.url.path},
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=_envelope(code, str(exc.detail), category, ErrorSeverity.WARNING),
        headers=getattr(exc, "headers", None),
    )


async def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )
