"""Error Handlers — map every escaping exception onto the REST error envelope.

Invariants:
    - BookshelfError keeps its own status; StoreError also logs the store code
    - RequestValidationError -> 400 VALIDATION_ERROR with one detail per failing field
    - Anything else -> 500 INTERNAL_ERROR, never echoing the exception text
    - 4xx are logged at warning, 5xx at error
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bookshelf.core.errors import (
    BookshelfError, ErrorCategory, ErrorSeverity, StoreError,
)

logger = logging.getLogger(__name__)


def _error_envelope(
    code: str,
    message: str,
    category: ErrorCategory,
    severity: ErrorSeverity,
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


def _field_details(exc: RequestValidationError) -> list[dict]:
    # loc starts with the request part ("body", "path", ...)
    return [
        {
            "field": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]


async def handle_bookshelf_error(request: Request, exc: BookshelfError):
    log_extra = {"error_code": exc.code, "path": request.url.path}
    if isinstance(exc, StoreError):
        log_extra["store_code"] = exc.store_code.value
    log = logger.error if exc.http_status >= 500 else logger.warning
    log(f"{request.method} {request.url.path} failed: {exc.message}", extra=log_extra)
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_validation_error(request: Request, exc: RequestValidationError):
    details = _field_details(exc)
    logger.warning(
        f"{request.method} {request.url.path} rejected: "
        f"{', '.join(d['field'] for d in details)}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_envelope(
            "VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR,
            details=details,
        ),
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.error(
        f"{request.method} {request.url.path} crashed: {type(exc).__name__}",
        exc_info=exc,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_envelope(
            "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the handlers, most specific first."""
    app.add_exception_handler(BookshelfError, handle_bookshelf_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
