"""Error Handlers — map every failure onto the catalog error envelope.

Invariants:
    - Body shape is always {"message": ..., "error": {"code", "message",
      "category", "severity", ...}}; clients read the top-level message
    - CatalogError keeps its own http_status (400/404/409/415/503)
    - RequestValidationError → 400, message "<field>: <problem>", or
      "Malformed JSON request body" when the body is not parseable
    - Anything else → 500 with a fixed message; details go to the log only
    - Request bodies are never echoed back (they may contain passwords)

Design Decisions:
    - Pydantic type errors use 400, not FastAPI's default 422, so every
      rejected request body is a bad request for API clients
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.errors import CatalogError, ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CatalogError, handle_catalog_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)


def _envelope(
    message: str,
    code: str,
    category: ErrorCategory,
    severity: ErrorSeverity,
    **extra,
) -> dict:
    return {
        "message": message,
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            **extra,
        },
    }


async def handle_catalog_error(request: Request, exc: CatalogError):
    log = logger.error if exc.http_status >= 500 else logger.info
    log(
        f"{exc.code} on {request.method} {request.url.path}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "method": request.method,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_validation_error(
    request: Request, exc: RequestValidationError,
):
    details = [
        {"field": _field_name(e["loc"]), "message": e["msg"], "type": e["type"]}
        for e in exc.errors()
    ]
    logger.info(
        f"Rejected request body on {request.method} {request.url.path}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            _summarize(details), "VALIDATION_ERROR",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR,
            details=details,
        ),
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.error(
        f"Unhandled {type(exc).__name__} on {request.method} {request.url.path}",
        exc_info=exc,
        extra={"path": request.url.path, "method": request.method},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            "An unexpected error occurred", "INTERNAL_ERROR",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )


def _field_name(loc: tuple) -> str:
    # loc is ("body", "price") for body fields, ("query", "search") for params
    return ".".join(str(part) for part in loc if part != "body")


def _summarize(details: list[dict]) -> str:
    if not details:
        return "Invalid request data"
    first = details[0]
    if first["type"] == "json_invalid":
        return "Malformed JSON request body"
    if first["field"]:
        return f"{first['field']}: {first['message']}"
    return first["message"]
