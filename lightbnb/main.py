"""
FastAPI application entry point.
Builds the application around an explicitly created database handle.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from contextlib import asynccontextmanager
from sqlalchemy.exc import SQLAlchemyError
from typing import Optional
import logging

from lightbnb.config import Settings, get_settings
from lightbnb.database import Database
from lightbnb.routers import properties_router, reservations_router, users_router
from lightbnb.services.error_handler import ErrorHandlerService
from lightbnb.utils.exceptions import APIException, ServiceUnavailableError

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """
    Create the LightBnB application.

    Args:
        settings: Application settings; defaults to the cached environment settings
        database: Database handle to serve requests with; one is created from
            settings when omitted and disposed on shutdown

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    owns_database = database is None
    db = database or Database.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {settings.app_name} v{settings.app_version}")
        logger.info(f"Environment: {settings.environment}")

        if not await db.ping():
            logger.error("Failed to connect to database on startup")

        yield

        logger.info("Shutting down application")
        if owns_database:
            await db.dispose()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Data access API for LightBnB users, properties and reservations.",
        lifespan=lifespan,
    )
    app.state.db = db
    app.state.settings = settings

    app.include_router(users_router, prefix=settings.api_prefix)
    app.include_router(properties_router, prefix=settings.api_prefix)
    app.include_router(reservations_router, prefix=settings.api_prefix)

    @app.exception_handler(APIException)
    async def api_exception_handler(request: Request, exc: APIException):
        """Handle custom API exceptions with structured error responses."""
        return ErrorHandlerService.handle_api_exception(exc, request)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle request validation errors with detailed field information."""
        return ErrorHandlerService.handle_validation_error(exc, request)

    @app.exception_handler(SQLAlchemyError)
    async def database_exception_handler(request: Request, exc: SQLAlchemyError):
        """Handle database errors with appropriate error responses."""
        return ErrorHandlerService.handle_database_error(exc, request)

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check with database connectivity test."""
        if not await app.state.db.ping():
            raise ServiceUnavailableError("Database connection failed")
        return {
            "status": "healthy",
            "service": settings.app_name,
            "version": settings.app_version,
            "database": "connected"
        }

    return app


if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(level=get_settings().log_level)
    uvicorn.run("lightbnb.main:create_app", factory=True, host="0.0.0.0", port=8000)
