"""Catalog API main application module.

This module initializes the FastAPI application and configures
core middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from catalog_api.api.attributes import router as attributes_router
from catalog_api.api.health import router as health_router
from catalog_api.api.middleware import setup_middleware
from catalog_api.api.product_types import router as product_types_router
from catalog_api.api.product_variants import router as product_variants_router
from catalog_api.api.products import router as products_router
from catalog_api.domain.exceptions import DomainError, ErrorKind
from catalog_api.infrastructure.config import settings
from catalog_api.infrastructure.database import create_tables, engine
from catalog_api.infrastructure.log_config import configure_logging

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    # Startup
    configure_logging()
    logger.info(
        "Starting Catalog API",
        version=settings.api_version,
        debug=settings.debug,
    )

    if settings.create_tables_on_startup:
        await create_tables()
        logger.info("Database tables ensured")

    yield

    # Shutdown
    logger.info("Shutting down Catalog API")
    await engine.dispose()


app = FastAPI(
    title="Catalog API",
    description="CRUD backend for attributes, product types, products and variants",
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware (must be added before custom middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Setup custom middleware (request ID, error handling)
setup_middleware(app)

# Include routers
app.include_router(health_router, tags=["Health"])
app.include_router(attributes_router)
app.include_router(product_types_router)
app.include_router(products_router)
app.include_router(product_variants_router)


# ============================================================================
# Custom Exception Handlers
# ============================================================================


ERROR_STATUS = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.UNEXPECTED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_envelope(status_code: int, message: str, error: str | None = None) -> JSONResponse:
    """Build the standard failure envelope response."""
    content: dict[str, object] = {"success": False, "message": message}
    if error is not None:
        content["error"] = error
    return JSONResponse(status_code=status_code, content=content)


@app.exception_handler(DomainError)
async def domain_exception_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Translate domain errors into envelopes by error kind."""
    status_code = ERROR_STATUS[exc.kind]

    if exc.kind is ErrorKind.UNEXPECTED:
        logger.exception(
            "Unexpected domain error",
            path=request.url.path,
            method=request.method,
            error=exc.message,
        )
        return error_envelope(status_code, "Internal Server Error", exc.message)

    logger.warning(
        "Domain error",
        path=request.url.path,
        method=request.method,
        kind=exc.kind.value,
        error=exc.message,
        **exc.details,
    )
    return error_envelope(status_code, exc.message)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle HTTP exceptions with consistent format."""
    detail = exc.detail
    if isinstance(detail, dict):
        message = detail.get("message", str(detail))
    else:
        message = str(detail)

    return error_envelope(exc.status_code, message)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed requests in the standard envelope."""
    errors = exc.errors()
    error = "; ".join(
        f"{'.'.join(str(part) for part in e.get('loc', ()))}: {e.get('msg', '')}"
        for e in errors
    )
    return error_envelope(
        422,
        "Invalid Request",
        error,
    )
