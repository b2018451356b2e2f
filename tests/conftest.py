"""Pytest configuration and shared fixtures."""

import pytest

# Load environment variables from .env file at test startup
# so EXPLORER_STRICT / EXPLORER_VERBOSE overrides are visible to fixtures
from dotenv import load_dotenv
load_dotenv()

# Import all fixtures from fixture modules
pytest_plugins = [
    "tests.fixtures.explorer",
    "tests.fixtures.api",
]
