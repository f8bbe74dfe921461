"""Integration test fixtures.

Integration tests drive the full ASGI stack (middleware, exception handlers,
routing) through TestClient; no external services are required.
"""

import pytest
from fastapi.testclient import TestClient

from bfhl_api.main import app as default_app


@pytest.fixture
def unsafe_client(test_app):
    """TestClient that returns 500 responses instead of re-raising server errors."""
    with TestClient(test_app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture(scope="session")
def default_client():
    """TestClient for the module-level app (global settings, metrics enabled)."""
    with TestClient(default_app) as test_client:
        yield test_client
