"""
lifecore - Main Application Entry Point

Recurrence rules and daily points for the task-management UI.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lifecore.core.config import get_settings
from lifecore.core.logger import setup_logger

logger = setup_logger(__name__)

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    settings = get_settings()
    logger.info("Starting lifecore in %s mode...", settings.ENVIRONMENT)
    yield
    logger.info("Shutting down lifecore...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="lifecore",
        description="Recurrence rule building and daily points aggregation",
        version=VERSION,
        lifespan=lifespan,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from lifecore.api import daily_points, recurrence_rules

    app.include_router(
        recurrence_rules.router, prefix="/api/recurrence-rules", tags=["recurrence_rules"]
    )
    app.include_router(daily_points.router, prefix="/api/daily-points", tags=["daily_points"])

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "environment": settings.ENVIRONMENT,
            "version": VERSION,
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
