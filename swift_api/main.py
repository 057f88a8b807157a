"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

1. Application Factory
   - create_app() returns a configured app, tests can build their own

2. Lifespan Events
   - startup: prepare the database schema before accepting requests
   - shutdown: dispose the engine (releases an in-memory database)

3. Exception Handlers
   - validation failures → 400 with one entry per violated field
   - book store errors → 500 with a generic message
   - exhausted read or write budget → 429 with Retry-After
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import SQLAlchemyError

from swift_api.config import get_settings
from swift_api.database import dispose_engine, init_db
from swift_api.routers import books_router
from swift_api.schemas import FieldViolation, ValidationErrorResponse
from swift_api.services.rate_limiter import limiter, rate_limit_exceeded_handler
from swift_api.services.validation import BookValidationError

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

STORE_ERROR_DETAIL = "The book store is unavailable. Please try again later."
INTERNAL_ERROR_DETAIL = "An internal error occurred."


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Code before yield: Runs on startup
    Code after yield: Runs on shutdown
    """
    # ----- STARTUP -----
    logger.info(f"Starting {settings.app_name}...")
    logger.info(f"Environment: {settings.environment}")
    logger.info(
        "Storage: "
        + ("in-memory (data is lost on exit)" if settings.uses_memory_database else "durable")
    )

    init_db()

    yield  # Application runs here

    # ----- SHUTDOWN -----
    logger.info(f"Shutting down {settings.app_name}...")
    dispose_engine()


# =============================================================================
# Error Formatting
# =============================================================================
def violations_from_request_error(exc: RequestValidationError) -> list[FieldViolation]:
    """
    Flatten FastAPI validation errors into field violations.

    The location tuple looks like ("body", "title") or ("query", "limit");
    the leading source is dropped unless it is the only element (e.g. a
    missing or unparseable body).
    """
    violations = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        field = ".".join(loc[1:]) if len(loc) > 1 else ".".join(loc)
        violations.append(FieldViolation(field=field or "body", message=error.get("msg", "")))
    return violations


def validation_error_response(violations: list[FieldViolation]) -> JSONResponse:
    body = ValidationErrorResponse(errors=violations)
    return JSONResponse(status_code=400, content=body.model_dump())


# =============================================================================
# Application Factory
# =============================================================================
def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Interactive documentation (/docs, /redoc, /openapi.json) is only
    mounted in the development environment.

    Returns:
        Configured FastAPI application instance
    """
    docs_enabled = settings.docs_enabled

    app = FastAPI(
        title=settings.app_name,
        description="""
## Books API

A minimal REST API for managing a catalog of books.

- **POST /books**: create a book
- **GET /books**: list books with `skip`/`limit`
- **GET /books/{id}**: fetch one book
- **PUT /books/{id}**: replace a book
- **DELETE /books/{id}**: delete a book
        """,
        version=settings.api_version,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
    )

    # -------------------------------------------------------------------------
    # Rate Limiting (read/write budgets are applied per route)
    # -------------------------------------------------------------------------
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Report malformed requests as 400 with one entry per field."""
        return validation_error_response(violations_from_request_error(exc))

    @app.exception_handler(BookValidationError)
    async def book_validation_exception_handler(
        request: Request,
        exc: BookValidationError,
    ) -> JSONResponse:
        """Report validation policy violations as 400."""
        return validation_error_response(exc.violations)

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        """A failed book store call is a 500; the cause stays in the log."""
        logger.error(f"Book store failure on {request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=500, content={"detail": STORE_ERROR_DETAIL})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        detail = str(exc) if settings.debug else INTERNAL_ERROR_DETAIL
        return JSONResponse(status_code=500, content={"detail": detail})

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    app.include_router(books_router)

    # -------------------------------------------------------------------------
    # Ambient Endpoints
    # -------------------------------------------------------------------------
    @app.get("/health", tags=["Health"], summary="Liveness and storage mode")
    def health_check() -> dict:
        return {
            "status": "healthy",
            "version": settings.api_version,
            "storage": "memory" if settings.uses_memory_database else "file",
        }

    @app.get("/", tags=["Root"], summary="Where to find the catalog")
    def root() -> dict:
        return {
            "message": f"Welcome to {settings.app_name}",
            "books": "/books",
            "docs": "/docs" if docs_enabled else None,
            "health": "/health",
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn swift_api.main:app

app = create_app()


def run() -> None:
    """Serve the application with uvicorn (the `swift-api` command)."""
    import uvicorn

    uvicorn.run(
        "swift_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
