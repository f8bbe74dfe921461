"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit and integration tests.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from bfhl_api.config import Settings
from bfhl_api.main import create_app


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with fixed identity fields.
    
    Override specific settings in individual tests as needed:
        def test_something(test_settings):
            test_settings.SECURITY_HEADERS_ENABLED = False
    """
    return Settings(
        # === Application ===
        APP_NAME="BFHL Classification API (Test)",
        APP_VERSION="1.0.0",
        ENVIRONMENT="development",
        DEBUG=True,
        LOG_LEVEL="DEBUG",
        
        # === Identity ===
        USER_ID="john_doe_17091999",
        EMAIL="john@xyz.com",
        ROLL_NUMBER="ABCD123",
        
        # === HTTP ===
        CORS_ALLOW_ORIGINS=["*"],
        SECURITY_HEADERS_ENABLED=True,
        
        # Metrics endpoint is tested against the module-level app only
        PROMETHEUS_ENABLED=False,
    )


@pytest.fixture
def test_app(test_settings: Settings) -> FastAPI:
    """Application built from test_settings."""
    return create_app(test_settings)


@pytest.fixture
def client(test_app: FastAPI):
    """TestClient running the app lifespan."""
    with TestClient(test_app) as test_client:
        yield test_client


@pytest.fixture
def scenario_inputs() -> dict[str, list[str]]:
    """Reference inputs with known classification results."""
    return {
        "mixed": ["a", "1", "334", "4", "R", "$"],
        "symbols": ["2", "a", "y", "4", "&", "-", "*", "5"],
        "empty_item": [""],
        "numbers_only": ["10", "21"],
    }
