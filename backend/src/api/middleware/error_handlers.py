"""Exception handlers producing the shared ``{error, message, detail}`` envelope."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

ERROR_CODES: Dict[int, Tuple[str, str]] = {
    status.HTTP_400_BAD_REQUEST: ("validation_error", "Invalid request"),
    status.HTTP_404_NOT_FOUND: ("not_found", "Document not found"),
    status.HTTP_405_METHOD_NOT_ALLOWED: ("method_not_allowed", "Method not allowed"),
    status.HTTP_500_INTERNAL_SERVER_ERROR: ("internal_error", "Internal server error"),
}


def error_body(status_code: int, detail: Any = None) -> Dict[str, Any]:
    """
    Build the JSON error envelope for ``status_code``.

    ``detail`` may be a dict carrying ``error``/``message``/``detail`` keys
    (any other keys become the detail payload) or a plain message string.
    """
    error, message = ERROR_CODES.get(
        status_code, ERROR_CODES[status.HTTP_500_INTERNAL_SERVER_ERROR]
    )
    extra: Optional[Dict[str, Any]] = None
    if isinstance(detail, dict):
        error = detail.get("error", error)
        message = detail.get("message", message)
        extra = detail.get("detail")
        if extra is None:
            extra = {k: v for k, v in detail.items() if k not in {"error", "message"}} or None
    elif isinstance(detail, str) and detail:
        message = detail
    return {"error": error, "message": message, "detail": extra}


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    body = error_body(status.HTTP_400_BAD_REQUEST, {"errors": jsonable_encoder(exc.errors())})
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        logger.info("404 for %s", request.url.path)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, exc.detail),
        headers=getattr(exc, "headers", None),
    )


async def internal_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception on %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(status.HTTP_500_INTERNAL_SERVER_ERROR),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach shared exception handlers to the FastAPI application."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, internal_exception_handler)


__all__ = [
    "ERROR_CODES",
    "error_body",
    "register_error_handlers",
    "validation_exception_handler",
    "http_exception_handler",
    "internal_exception_handler",
]
