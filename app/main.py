from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import Optional
import logging

import uvicorn

from app.config import Settings, get_settings
from app.database import Database
from app.api import products, health
from app.api.errors import register_exception_handlers

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Application settings, defaults to the environment
        database: Database to serve from, defaults to one built from settings

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    configure_logging(settings)
    db = database or Database.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Lifespan context manager for startup and shutdown events.
        """
        # Startup
        logger.info("Starting up application...")

        # Create the PRODUCTS table if it does not exist yet
        logger.info("Creating database tables...")
        db.create_all()
        logger.info("Database tables created successfully")

        yield

        # Shutdown
        logger.info("Shutting down application...")
        db.dispose()

    app = FastAPI(
        title=settings.APP_NAME,
        description="""
        A REST API for managing a catalog of products:

        - **List** all products
        - **Get** a product by ID
        - **Create** a product (names must be unique)
        - **Update** a product's name, price and stock
        - **Delete** a product
        """,
        version=settings.APP_VERSION,
        lifespan=lifespan
    )
    app.state.db = db

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include API routers
    app.include_router(health.router, prefix="/api")
    app.include_router(products.router, prefix="/api")

    @app.get("/", tags=["Root"])
    def root():
        """Root endpoint with API information."""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "docs": "/docs",
            "redoc": "/redoc",
            "health": "/api/health"
        }

    return app


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
