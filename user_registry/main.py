"""
FastAPI Application
===================

Main FastAPI app setup with all routes and middleware.
The DI container is built here once and attached to app.state.
"""
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from user_registry.api.v1 import user_router
from user_registry.core.config import Settings, get_settings
from user_registry.core.logging_config import configure_logging
from user_registry.di.container import DIContainer
from user_registry.di.providers import USER_DATABASE_KEY

logger = logging.getLogger(__name__)


def create_application(
    settings: Optional[Settings] = None,
    container: Optional[DIContainer] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Logging configuration
    - Dependency container construction
    - CORS middleware configuration
    - API route registration

    Args:
        settings: Settings to use; defaults to environment settings
        container: Prebuilt container; a new one is created when omitted

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title=settings.app_title,
        description="Layered user registry backed by an in-memory store",
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    application.state.container = container or DIContainer(settings)

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register API routers
    application.include_router(user_router, prefix="/api/v1/users")

    @application.get("/")
    async def root():
        """Root endpoint - health check."""
        return {
            "status": "running",
            "service": settings.app_title,
            "version": settings.app_version,
            "docs": "/docs"
        }

    @application.get("/health")
    async def health(request: Request):
        """Health check endpoint."""
        database = request.app.state.container.get(USER_DATABASE_KEY)
        return {"status": "healthy", "users": database.count()}

    logger.info(f"{settings.app_title} {settings.app_version} initialized")
    return application
