"""
Sahara FastAPI Application Entry Point

Main application initialization with:
- Lifespan management (startup/shutdown)
- CORS configuration
- Error handling middleware
- Router registration
- Metrics endpoint
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sahara import __version__
from sahara.config import get_settings
from sahara.config.logging_config import configure_logging, get_logger
from sahara.api.v1.router import api_router
from sahara.api.v1.endpoints.health import mark_startup_complete
from sahara.api.middleware.error_handler import ErrorHandlerMiddleware
from sahara.infrastructure.metrics import metrics_router, update_system_info

# Initialize settings and logging
settings = get_settings()
configure_logging(settings)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    The classifier holds no external resources, so startup only
    publishes build info and flips the startup probe.
    """
    logger.info(
        "Starting Sahara sentiment service",
        env=settings.env,
        version=__version__,
    )

    update_system_info(version=__version__, environment=settings.env)
    mark_startup_complete()

    try:
        yield
    finally:
        logger.info("Sahara sentiment service shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="Sahara Sentiment API",
        description="Rule-based sentiment, risk and wellness scoring for the Sahara companion",
        version=__version__,
        docs_url="/docs" if not settings.is_production() else None,
        redoc_url="/redoc" if not settings.is_production() else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_middleware(ErrorHandlerMiddleware)

    app.include_router(
        api_router,
        prefix=f"/api/{settings.api_version}",
    )
    app.include_router(metrics_router)

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        """Root endpoint - basic info."""
        return {
            "name": "Sahara Sentiment API",
            "version": __version__,
            "status": "operational",
        }

    return app


app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "sahara.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.env == "development",
        log_level=settings.log_level.lower(),
    )
