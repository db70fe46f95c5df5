"""Error handlers and request logging middleware."""

from __future__ import annotations

import time
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response
from ulid import ULID

from mlclient.core.exceptions import ActionNotFoundError, InvalidArgumentError
from mlclient.core.logging import add_request_context, get_logger, reset_request_context
from mlclient.rest.utils import on_failure

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


async def invalid_argument_handler(request: Request, exc: Exception) -> Response:
    """Map invalid arguments to 400."""
    return on_failure(status.HTTP_400_BAD_REQUEST, str(exc), exc)


async def validation_error_handler(request: Request, exc: Exception) -> Response:
    """Map pydantic and request validation errors to 400."""
    if isinstance(exc, (ValidationError, RequestValidationError)):
        errors = exc.errors()
        reason = "; ".join(
            f"{'.'.join(str(loc) for loc in error.get('loc', ()))}: {error.get('msg', '')}" for error in errors
        )
        return on_failure(status.HTTP_400_BAD_REQUEST, reason or "Invalid request", exc)
    return on_failure(status.HTTP_400_BAD_REQUEST, str(exc), exc)


async def action_not_found_handler(request: Request, exc: Exception) -> Response:
    """Map actions without a registered handler to 501."""
    return on_failure(status.HTTP_501_NOT_IMPLEMENTED, str(exc), exc)


async def unhandled_error_handler(request: Request, exc: Exception) -> Response:
    """Map any other failure to 500."""
    logger.exception("http.unhandled_error", path=request.url.path)
    return on_failure(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to process the request", exc)


def add_error_handlers(app: FastAPI) -> None:
    """Install the exception handlers on an app."""
    app.add_exception_handler(InvalidArgumentError, invalid_argument_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(ActionNotFoundError, action_not_found_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Bind a request id to the logging context and log each request."""

    async def dispatch(self, request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        """Log request start and completion with duration."""
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(ULID())
        reset_request_context()
        add_request_context(request_id=request_id, method=request.method, path=request.url.path)

        start = time.perf_counter()
        logger.info("http.request.start")
        try:
            response = await call_next(request)
            duration_ms = round((time.perf_counter() - start) * 1000, 2)
            logger.info("http.request.complete", status_code=response.status_code, duration_ms=duration_ms)
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        except Exception:
            duration_ms = round((time.perf_counter() - start) * 1000, 2)
            logger.exception("http.request.failed", duration_ms=duration_ms)
            raise
        finally:
            reset_request_context()


def add_logging_middleware(app: FastAPI) -> None:
    """Install the request logging middleware on an app."""
    app.add_middleware(RequestLoggingMiddleware)
