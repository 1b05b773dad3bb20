"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from vocabcards.config import settings
from vocabcards.database import init_db
from vocabcards.logging_config import setup_logging
from vocabcards.routes import process_router

# Configure logging
setup_logging()
logger = logging.getLogger(__name__)

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    # Startup
    logger.info("Starting vocabcards...")

    # Ensure directories exist
    settings.data_dir.mkdir(parents=True, exist_ok=True)

    # Initialize database
    await init_db()
    logger.info("Database initialized")

    yield

    # Shutdown
    logger.info("Shutting down vocabcards...")


# Create FastAPI app
app = FastAPI(
    title="vocabcards",
    description="Create German vocabulary flashcards from CSV word lists",
    version=VERSION,
    lifespan=lifespan,
)

# Include routers
app.include_router(process_router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": VERSION,
    }


def run() -> None:
    """Run the application (for use with `vocabcards-server` command)."""
    import uvicorn

    uvicorn.run(
        "vocabcards.main:app",
        host="0.0.0.0",  # noqa: S104  # nosec B104 - Development server
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    run()
