"""
FastAPI Application Factory.
Creates and configures the FastAPI application with all routers, middleware, and DI.

Run with uvicorn:
    uvicorn src.fastapi_app:create_fastapi_app --factory --port 5001
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from starlette.exceptions import HTTPException as StarletteHTTPException
from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka

from src.config.logging_config import setup_logging
from src.config.settings import get_config
from src.domain.exceptions import DomainError, ErrorKind
from src.setup.ioc.container import create_container
from src.presentation.api import messages_router, users_router, metrics_router
from src.presentation.middleware import CorrelationIdMiddleware, MetricsMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager.

    - Startup: container and Dishka are already set up by the factory
    - Shutdown: Close DI container (disconnects Prisma, etc.)
    """
    logger.info("FastAPI application started. DI container initialized.")
    yield
    await app.state.dishka_container.close()
    logger.info("FastAPI application shutdown. DI container closed.")


def domain_error_response(exc: DomainError) -> JSONResponse:
    """Map a typed error to `{error, type, status_code, timestamp}`."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.message,
            "type": exc.kind.value,
            "status_code": exc.status_code,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


def create_fastapi_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: DI container to use; built from get_config() when omitted

    Returns:
        FastAPI application instance
    """
    settings = get_config()
    setup_logging(settings.LOG_LEVEL, settings.LOG_PATH or None)

    app = FastAPI(
        title="Messaging API",
        description="Internal messaging between users: send, inbox, sent, mark read, delete",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Setup Dishka BEFORE app starts (must add middleware before startup)
    setup_dishka(container or create_container(), app)

    app.add_middleware(MetricsMiddleware)
    # Correlation ID middleware (must be added before CORS)
    app.add_middleware(CorrelationIdMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(DomainError)
    async def domain_exception_handler(request: Request, exc: DomainError):
        match exc.kind:
            case ErrorKind.DATABASE_ERROR:
                logger.error(f"[{request.method} {request.url.path}] {exc.message}")
            case _:
                logger.info(
                    f"[{request.method} {request.url.path}] "
                    f"{exc.kind.value}: {exc.message}"
                )
        return domain_error_response(exc)

    # Validation error handler - shows detailed Pydantic errors
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.info(f"[VALIDATION ERROR] {exc.errors()}")
        return JSONResponse(
            status_code=400,
            content={
                "error": "Validation error",
                "details": jsonable_encoder(exc.errors()),
            },
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"[GLOBAL ERROR] {type(exc).__name__}: {exc}")
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"},
        )

    # Health check routes
    @app.get("/", tags=["health"])
    async def root():
        return {"message": "FastAPI server is running."}

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    # Register routers
    app.include_router(messages_router)  # /messages, /messages/sent, /messages/{id}
    app.include_router(users_router)  # GET /users/recipients
    app.include_router(metrics_router)  # GET /metrics

    return app
