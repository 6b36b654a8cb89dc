"""FastAPI application factory and configuration.

This module provides the application factory function for creating
and configuring the FastAPI application with all middleware, routes,
exception handlers and lifecycle handlers.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from studybuddy.core.config import Settings, get_settings
from studybuddy.core.logging import (
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
    new_correlation_id,
)
from studybuddy.infrastructure.auth import AuthenticationError, JWTService
from studybuddy.infrastructure.persistence.database import (
    close_database,
    init_database,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager: database setup and teardown."""
    settings: Settings = app.state.settings

    configure_logging(settings)
    logger.info(
        "Starting StudyBuddy",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
    )

    try:
        await init_database(settings)
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        raise

    yield

    logger.info("Shutting down StudyBuddy")
    await close_database()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to build the app from. Defaults to the cached
            application settings.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="JWT authentication backend for Study Buddy",
        docs_url="/docs" if settings.is_development else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.is_development else None,
        lifespan=lifespan,
    )

    app.state.settings = settings
    # The signing secret is read once here and injected into the token service
    app.state.jwt_service = JWTService.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_health_check(app)
    register_routes(app, settings)
    register_exception_handlers(app, settings)
    register_middleware(app)

    return app


def register_health_check(app: FastAPI) -> None:
    """Register health check endpoints."""

    @app.get("/health", tags=["health"])
    async def health_check():
        """Returns 200 if the service is running."""
        return {"status": "healthy", "service": app.title, "version": app.version}

    @app.get("/ready", tags=["health"])
    async def readiness_check():
        """Returns 200 if the database is reachable."""
        from studybuddy.infrastructure.persistence.database import get_db_manager

        if await get_db_manager().check_connection():
            return {"status": "ready", "database": "connected"}
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "database": "disconnected"},
        )


def register_routes(app: FastAPI, settings: Settings) -> None:
    """Register API routes."""
    from studybuddy.infrastructure.api.routes import auth_router, home_router

    app.include_router(auth_router, prefix=f"{settings.api_prefix}/auth", tags=["auth"])
    app.include_router(home_router, prefix=settings.api_prefix, tags=["home"])


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Register global exception handlers."""

    @app.exception_handler(AuthenticationError)
    async def authentication_error_handler(request: Request, exc: AuthenticationError):
        return JSONResponse(
            status_code=401,
            content={"error": exc.message},
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        details = []
        for error in exc.errors():
            location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
            details.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
        return JSONResponse(
            status_code=422,
            content={"error": "Validation error", "details": details},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception",
            path=str(request.url.path),
            method=request.method,
            error=str(exc),
            exc_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "detail": str(exc) if settings.debug else "An unexpected error occurred",
            },
        )


def register_middleware(app: FastAPI) -> None:
    """Register custom middleware."""

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        """Log each request and tag it with a correlation ID."""
        correlation_id = request.headers.get("X-Correlation-ID") or new_correlation_id()
        bind_correlation_id(correlation_id)

        logger.info("Request started", method=request.method, path=request.url.path)

        try:
            response = await call_next(request)
            logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
            )
            response.headers["X-Correlation-ID"] = correlation_id
            return response
        finally:
            clear_context()


# Create the application instance
app = create_app()
