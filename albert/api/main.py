"""
FastAPI Application - Podcast Generation Gateway.
"""
import logging
from pathlib import Path
from contextlib import asynccontextmanager
from typing import AsyncGenerator

# Load environment variables from .env file FIRST
from dotenv import load_dotenv
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(env_path)

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from albert import __version__
from .routes import health_router, podcast_router
from .exceptions import APIError, api_error_handler, generic_exception_handler

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Application lifespan handler."""
    logger.info("=" * 60)
    logger.info("Starting Albert Podcast API...")
    logger.info("=" * 60)

    # Load and validate configuration
    from albert.config import config
    config.log_status()

    logger.info("Podcast generation available at POST /api/getInfo")

    yield

    logger.info("Shutting down Albert Podcast API...")
    from albert.services.podcast import close_orchestrator
    await close_orchestrator()


def create_app(debug: bool = False) -> FastAPI:
    """Create and configure FastAPI application."""
    app = FastAPI(
        title="Albert Podcast API",
        description="Streaming generator for educational podcasts",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
        debug=debug,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    app.include_router(health_router)
    app.include_router(podcast_router)

    return app


app = create_app(debug=False)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "albert.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info",
    )
