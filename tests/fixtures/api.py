"""Shared fixtures for API testing.

These fixtures provide a TestClient and a fresh ExplorerSession for each
test, ensuring test isolation.
"""

import pytest
from fastapi.testclient import TestClient

from api.dependencies import ExplorerSession
from main import app
from tests.fixtures.explorer import create_explorer_state


@pytest.fixture
def test_client():
    """Provide a FastAPI TestClient for making API requests.

    The TestClient makes HTTP requests to the app without running a server.

    Returns:
        A FastAPI TestClient instance.
    """
    return TestClient(app)


@pytest.fixture
def fresh_session():
    """Provide a fresh ExplorerSession wrapping an empty, strict explorer.

    Returns:
        A newly created ExplorerSession.
    """
    return ExplorerSession(create_explorer_state())
