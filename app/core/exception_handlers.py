"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to HTTP responses; the body is always {"error", "message"[, "details"]}.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.domain.exceptions import FiretrackException, InfrastructureException

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status when applicable
_ERROR_CODE_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "AUTHENTICATION_ERROR": 401,
    "INVALID_CREDENTIALS": 401,
    "ALREADY_AUTHENTICATED": 403,
    "USER_NOT_FOUND": 404,
    "USER_ALREADY_EXISTS": 409,
    "USER_ALREADY_ACTIVATED": 409,
    "NO_PENDING_ACTIVATION": 400,
    "INCORRECT_ACTIVATION_CODE": 400,
    "ACTIVATION_CODE_EXPIRED": 400,
    "ACTIVATION_LOCKED": 429,
}


def error_status(exc: FiretrackException) -> int:
    """HTTP status for a domain exception (503 for any infrastructure failure)."""
    if isinstance(exc, InfrastructureException):
        return 503
    return _ERROR_CODE_STATUS.get(exc.error_code, 400)


def _firetrack_exception_handler(
    request: Request, exc: FiretrackException
) -> JSONResponse:
    """Return JSON from FiretrackException.to_dict() with appropriate status code."""
    status = error_status(exc)
    if status >= 500:
        logger.error("%s: %s", exc.error_code, exc.message)
    return JSONResponse(status_code=status, content=exc.to_dict())


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 with validation error details (input values are not echoed)."""
    details = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=422,
        content={
            "error": "VALIDATION_ERROR",
            "message": "Request validation failed",
            "details": details,
        },
    )


def _rate_limit_exception_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Return 429 in the same error shape as domain exceptions."""
    return JSONResponse(
        status_code=429,
        content={
            "error": "RATE_LIMITED",
            "message": "Too many requests. Please try again later.",
        },
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (status + detail)."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "HTTP_ERROR", "message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    detail: Any = str(exc) if settings.debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": detail},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: FiretrackException (and
    subclasses), RequestValidationError, RateLimitExceeded,
    StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(FiretrackException, _firetrack_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
