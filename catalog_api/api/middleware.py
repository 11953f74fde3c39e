"""HTTP middleware for the catalog API.

Two layers wrap every request:
- ``RequestIdMiddleware`` tags the request and its log lines with an ID
  and reports method, path, status and latency once the response is
  ready.
- ``ErrorHandlerMiddleware`` turns exceptions nobody handled into the
  standard failure envelope with status 500.
"""

import time
from typing import Callable
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from catalog_api.api.schemas import ErrorEnvelope

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"


# ============================================================================
# Request ID Middleware
# ============================================================================


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Correlate requests, responses and log lines by request ID.

    The ID comes from the ``X-Request-ID`` header when the caller sends
    one and is generated otherwise. Handlers read it from
    ``request.state.request_id``.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        request.state.request_id = request_id

        structlog.contextvars.bind_contextvars(request_id=request_id)
        started = time.perf_counter()
        try:
            response = await call_next(request)
        finally:
            structlog.contextvars.unbind_contextvars("request_id")

        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
        log = logger.warning if response.status_code >= 500 else logger.info
        log(
            "Request completed",
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=elapsed_ms,
        )

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


# ============================================================================
# Error Handling Middleware
# ============================================================================


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Render unhandled exceptions as a 500 failure envelope.

    The exception text goes into ``error`` so that callers can report
    it; the traceback only goes to the log.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            logger.exception(
                "Unhandled exception",
                method=request.method,
                path=request.url.path,
                error=str(e),
            )
            body = ErrorEnvelope(message="Internal Server Error", error=str(e))
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=body.model_dump(),
            )


# ============================================================================
# Middleware Setup
# ============================================================================


def setup_middleware(app: FastAPI) -> None:
    """Install the catalog middleware stack.

    Starlette runs the most recently added middleware first, so the
    request ID layer sees the 500 responses produced by the error layer.

    Args:
        app: FastAPI application instance.
    """
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_middleware(RequestIdMiddleware)
