"""Shared fixtures for API integration tests.

This module provides the TestClient wired to a fresh ExplorerSession through
FastAPI's dependency override system.
"""

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_explorer_session
from main import app


@pytest.fixture
def client_with_explorer(fresh_session):
    """Provide a TestClient with a fresh ExplorerSession injected.

    Args:
        fresh_session: A pytest fixture providing a fresh ExplorerSession.

    Yields:
        A tuple of (TestClient, ExplorerSession) for testing.

    Example:
        def test_something(client_with_explorer):
            client, session = client_with_explorer
            response = client.get("/explorer/tree")
            assert response.status_code == 200
    """
    app.dependency_overrides[get_explorer_session] = lambda: fresh_session

    client = TestClient(app)

    yield client, fresh_session

    app.dependency_overrides.clear()
