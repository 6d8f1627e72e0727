"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to the {"error", "message", "details"} envelope. Infrastructure
failures are logged with their details and answered with a generic message.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from sponsorship.core.config import get_settings
from sponsorship.domain.exceptions import SponsorshipException

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status
_ERROR_CODE_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "ELEMENT_UNAVAILABLE": 400,
    "USER_ALREADY_EXISTS": 400,
    "AUTHENTICATION_ERROR": 401,
    "RESOURCE_NOT_FOUND": 404,
    "ROW_MAPPER_ERROR": 500,
    "STORE_ERROR": 500,
    "MAIL_DELIVERY_ERROR": 500,
    "CERTIFICATE_ERROR": 500,
    "TOKEN_SIGNING_ERROR": 500,
}


def _sponsorship_exception_handler(request: Request, exc: SponsorshipException) -> JSONResponse:
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    if status >= 500:
        logger.error(
            "%s %s failed: %s %s (%s)",
            request.method,
            request.url.path,
            exc.error_code,
            exc.message,
            exc.details,
        )
        # details may carry addresses or driver messages; keep them in the log only
        return JSONResponse(
            status_code=status,
            content={"error": exc.error_code, "message": exc.message},
        )
    return JSONResponse(status_code=status, content=exc.to_dict())


def _validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Return 400 with validation error details (malformed body, missing query)."""
    return JSONResponse(
        status_code=400,
        content={
            "error": "VALIDATION_ERROR",
            "message": "invalid request",
            "details": jsonable_errors(exc),
        },
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Validation errors without the ctx/input entries (may hold non-JSON values)."""
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]


def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "HTTP_ERROR", "message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    detail: Any = str(exc) if get_settings().debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": detail},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Handlers: SponsorshipException (and subclasses), RequestValidationError,
    StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(SponsorshipException, _sponsorship_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _generic_exception_handler)
