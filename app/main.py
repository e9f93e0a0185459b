# 📄 File: app/main.py
#
# 🧭 Purpose (Layman Explanation):
# The main control center that starts up CigarMap, connects all the different parts together,
# and makes sure everything is ready to handle requests from the website and admin panel.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point with middleware setup, exception handlers,
# router registration, and database/session/Supabase lifecycle management.
#
# 🔗 Dependencies:
# - FastAPI framework, uvicorn
# - app.shared.config.settings
# - app.shared.infrastructure.database (connection, session)
# - app.api.v1.router, app.api.middleware
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup
# - Docker container entry point
# - Development server commands

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from app.api.middleware.error_handling import register_exception_handlers
from app.api.middleware.logging import RequestLoggingMiddleware
from app.api.v1.router import api_v1_router
from app.modules.onboarding.application.session_registry import get_session_registry
from app.shared.config.settings import get_settings
from app.shared.config.supabase import cleanup_supabase
from app.shared.infrastructure.database.connection import close_database, initialize_database
from app.shared.infrastructure.database.session import initialize_sessions
from app.shared.utils.logging import log_shutdown_event, log_startup_event, setup_logging

# Get application settings
settings = get_settings()

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.
    
    Opens the database engine and session factory on startup; on shutdown
    drops live onboarding sessions (releasing their staged files) and
    closes the database and Supabase clients.
    """
    log_startup_event(settings.APP_NAME, settings.APP_VERSION, {"environment": settings.ENVIRONMENT})

    await initialize_database()
    logger.info("✅ Database connection initialized")

    await initialize_sessions()
    logger.info("✅ Session manager initialized")

    try:
        yield
    finally:
        log_shutdown_event(settings.APP_NAME)

        get_session_registry().clear()
        await close_database()
        await cleanup_supabase()
        logger.info("✅ CigarMap API shutdown complete")


def create_application() -> FastAPI:
    """
    Application factory function.
    
    Creates and configures the FastAPI application with all necessary
    middleware, routers, and settings based on the current environment.
    
    Returns:
        FastAPI: Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.ENABLE_SWAGGER_UI else None,
        redoc_url="/redoc" if settings.ENABLE_REDOC else None,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )
    
    # =========================================================================
    # MIDDLEWARE CONFIGURATION
    # =========================================================================
    
    if settings.ENVIRONMENT != "test":
        app.add_middleware(RequestLoggingMiddleware)
    
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[origin.strip() for origin in settings.CORS_ORIGINS.split(",") if origin.strip()],
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # =========================================================================
    # EXCEPTION HANDLERS
    # =========================================================================

    register_exception_handlers(app)

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================
    
    app.include_router(api_v1_router, prefix="/api/v1")
    
    # =========================================================================
    # ROOT ENDPOINTS
    # =========================================================================
    
    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "description": settings.APP_DESCRIPTION,
            "docs_url": "/docs" if settings.ENABLE_SWAGGER_UI else None,
            "health_check": "/api/v1/health",
            "api_base": "/api/v1",
        }
    
    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        return Response(status_code=204)
    
    return app


# Create the FastAPI application
app = create_application()


def main():
    """
    Run the application in development.
    
    Used when running ``python -m app.main`` or the ``cigarmap`` script.
    """
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.ENVIRONMENT == "development",
        log_level=settings.LOG_LEVEL.lower(),
        workers=1 if settings.RELOAD else settings.WORKERS,
    )


if __name__ == "__main__":
    main()
