"""
FXCONV Main Application Entry Point

Serves the converter over HTTP. The rate table is read from settings once,
when the first request builds the converter.
"""

import logging
import sys

import uvicorn
from fastapi import FastAPI

from fxconv import __version__
from fxconv.api import router
from fxconv.config import get_settings

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create FastAPI application."""
    app = FastAPI(
        title="FXCONV",
        description="Table-driven currency conversion service",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/api/v1/openapi.json"
    )

    app.include_router(router)

    @app.get("/")
    def root():
        """Root endpoint with API information."""
        return {
            "name": "FXCONV",
            "version": __version__,
            "docs": "/docs",
            "api": {
                "convert": "/api/v1/convert",
                "rates": "/api/v1/rates",
                "rate_by_code": "/api/v1/rates/{code}",
                "health": "/api/v1/health"
            }
        }

    return app


# Create application instance
app = create_app()


def main():
    """Main entry point for running the server."""
    settings = get_settings()

    logging.getLogger().setLevel(settings.log_level.upper())
    logger.info(f"Starting FXCONV v.{__version__} on {settings.api_host}:{settings.api_port}")

    uvicorn.run(
        "fxconv.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    main()
