"""Main entry point for the Virtual File Explorer FastAPI application.

This module creates and configures the FastAPI app instance that serves the
REST API over a shared in-memory file explorer.

To run the development server:
    uv run uvicorn main:app --reload

To run in production:
    uv run uvicorn main:app --host 0.0.0.0 --port 8000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from pydantic import ValidationError

from api.dependencies import initialize_explorer, shutdown_explorer
from api.exceptions import (
    generic_exception_handler,
    not_a_file_handler,
    path_not_found_handler,
    runtime_error_handler,
    validation_exception_handler,
    value_error_handler,
)
from api.routes import actions as actions_routes
from api.routes import queries as queries_routes
from models.exceptions import NotAFileError, PathNotFoundError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events.

    This context manager runs code at startup (before yield) and shutdown (after yield).

    Args:
        app: The FastAPI application instance.

    Yields:
        Control back to FastAPI to handle requests.
    """
    logger.info("Starting Virtual File Explorer - initializing explorer state")
    initialize_explorer()

    yield  # App runs and handles requests here

    logger.info("Shutting down Virtual File Explorer")
    shutdown_explorer()


# Create the FastAPI application instance
app = FastAPI(
    title="Virtual File Explorer",
    description="API for replaying file explorer actions against an in-memory tree",
    version="0.1.0",
    lifespan=lifespan,
)

# Register exception handlers
# Order matters: specific exceptions before general ones
app.add_exception_handler(PathNotFoundError, path_not_found_handler)
app.add_exception_handler(NotAFileError, not_a_file_handler)
app.add_exception_handler(ValidationError, validation_exception_handler)
app.add_exception_handler(ValueError, value_error_handler)
app.add_exception_handler(RuntimeError, runtime_error_handler)
app.add_exception_handler(Exception, generic_exception_handler)

# Register route modules
app.include_router(actions_routes.router)
app.include_router(queries_routes.router)


@app.get("/")
async def root():
    """Root endpoint - returns a welcome message.

    Returns:
        A dictionary with a welcome message.
    """
    return {
        "message": "Welcome to the Virtual File Explorer API",
        "version": "0.1.0",
        "docs_url": "/docs",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring.

    Returns:
        A dictionary indicating the service is healthy.
    """
    return {"status": "healthy"}
