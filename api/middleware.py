"""
Request logging middleware and the API's exception handlers.

Every error response uses the same envelope:
    {"success": false, "error": {"code", "message", "details"?}, "timestamp"}
"""

import time
import logging
from datetime import datetime, timezone
from typing import Any, Optional
from uuid import uuid4

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from app.exceptions import ServiceValidationError, NotFoundError, ForbiddenError

logger = logging.getLogger("mealboard.middleware")

REQUEST_ID_HEADER = "X-Request-ID"

_SERVICE_ERROR_CODES = {
    NotFoundError: "NOT_FOUND",
    ForbiddenError: "FORBIDDEN",
}


def error_response(status_code: int, code: str, message: Any, details: Optional[Any] = None) -> JSONResponse:
    error = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": error,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request with a request id and timing; echo both back as headers."""

    async def dispatch(self, request: Request, call_next):
        # Reuse the caller's id so a planner request can be traced end to end
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        request.state.request_id = request_id
        started = time.perf_counter()
        context = {"request_id": request_id, "method": request.method, "path": request.url.path}

        try:
            response = await call_next(request)
        except Exception:
            logger.error(
                "%s %s failed after %.4fs",
                request.method, request.url.path, time.perf_counter() - started,
                extra=context,
                exc_info=True,
            )
            raise

        elapsed = time.perf_counter() - started
        logger.info(
            "%s %s -> %d (%.4fs)",
            request.method, request.url.path, response.status_code, elapsed,
            extra=context,
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"
        return response


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle Pydantic request validation errors"""
    logger.warning(f"Validation error on {request.url}: {exc.errors()}")
    # ctx may carry the ValueError raised by a model validator
    details = jsonable_encoder(exc.errors(), custom_encoder={Exception: str})
    return error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY, "VALIDATION_ERROR", "Request validation failed", details
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions (unknown routes, wrong methods, ...)"""
    logger.warning(f"HTTP {exc.status_code} on {request.url}: {exc.detail}")
    return error_response(exc.status_code, f"HTTP_{exc.status_code}", exc.detail)


async def service_exception_handler(request: Request, exc: ServiceValidationError):
    """Handle service errors; the status comes from the exception class"""
    logger.warning(f"{type(exc).__name__} on {request.url}: {exc}")
    code = exc.code or _SERVICE_ERROR_CODES.get(type(exc), "SERVICE_VALIDATION_ERROR")
    return error_response(exc.http_status, code, exc.message, exc.details)


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors"""
    logger.exception(f"Unexpected error on {request.url}: {exc}")
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_SERVER_ERROR", "An unexpected error occurred"
    )
