"""Test fixtures for the virtual file explorer.

This package provides reusable test fixtures:
- explorer: Action and ExplorerState factories plus sample action sequences
- api: TestClient and fresh explorer session fixtures
"""
