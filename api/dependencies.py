"""Dependency injection providers for the FastAPI application.

This module defines dependencies that can be injected into route handlers,
providing access to the shared ExplorerState and the lock that serializes
access to it.
"""

import logging
import os
import threading
from typing import Annotated

from fastapi import Depends

from models.explorer_state import ExplorerState

logger = logging.getLogger(__name__)


class ExplorerSession:
    """The shared explorer together with its single-writer lock.

    ExplorerState is not thread-safe. The routes are ``async def`` and run
    on the event loop one at a time, and each one still holds ``lock``
    around its access so code that shares the session from another thread
    (an embedding app, a test) never sees a half-applied batch.

    Attributes:
        explorer: The shared ExplorerState.
        lock: Lock guarding every access to ``explorer``.
    """

    def __init__(self, explorer: ExplorerState):
        self.explorer = explorer
        self.lock = threading.Lock()


# Global state
# One explorer per process, created when the app starts
_session: ExplorerSession | None = None


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def get_explorer_session() -> ExplorerSession:
    """Get the shared ExplorerSession instance.

    This function is a FastAPI dependency. When you add it to a route handler's
    parameters, FastAPI will automatically call this function and inject the result.

    Returns:
        The shared ExplorerSession instance.

    Raises:
        RuntimeError: If the session hasn't been initialized yet.
    """
    if _session is None:
        raise RuntimeError(
            "ExplorerState not initialized. Call initialize_explorer() first."
        )

    return _session


def initialize_explorer() -> ExplorerSession:
    """Initialize the shared explorer.

    This should be called once when the FastAPI app starts up. Strictness
    and verbosity come from the EXPLORER_STRICT and EXPLORER_VERBOSE
    environment variables.

    Returns:
        The newly created ExplorerSession instance.
    """
    global _session

    explorer = ExplorerState(
        strict=_env_flag("EXPLORER_STRICT", True),
        verbose=_env_flag("EXPLORER_VERBOSE", False),
    )
    _session = ExplorerSession(explorer)
    logger.info(
        f"Explorer initialized (strict={explorer.strict}, verbose={explorer.verbose})"
    )

    return _session


def shutdown_explorer() -> None:
    """Drop the shared explorer when the FastAPI app shuts down."""
    global _session

    _session = None


# Type alias for dependency injection
# This makes the type annotation cleaner in route handlers
ExplorerSessionDep = Annotated[ExplorerSession, Depends(get_explorer_session)]
