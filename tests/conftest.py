"""
Pytest configuration and common fixtures for placeholder-svg tests.
"""

import os

import pytest
from fastapi.testclient import TestClient


def _ensure_test_env() -> None:
    """Ensure environment variables used by Settings are predictable in tests."""
    default_env_values = {
        "ENVIRONMENT": "production",
        "LOG_LEVEL": "INFO",
        "DOCS_ENABLED": "false",
        "PORT": "8080",
    }

    for key, value in default_env_values.items():
        os.environ.setdefault(key, value)

    # Never report test failures to a real Sentry project
    os.environ["SENTRY_DSN"] = ""


_ensure_test_env()

from placeholder_svg.core.config import Settings, settings  # noqa: E402
from placeholder_svg.main import create_app  # noqa: E402


@pytest.fixture
def app_settings():
    """Get application settings."""
    return settings


@pytest.fixture
def prod_settings() -> Settings:
    return Settings(ENVIRONMENT="production", SENTRY_DSN="")


@pytest.fixture
def dev_settings() -> Settings:
    return Settings(ENVIRONMENT="DEV", SENTRY_DSN="")


@pytest.fixture
def client(prod_settings):
    """Test client for an app running with production settings."""
    return TestClient(create_app(prod_settings))


@pytest.fixture
def dev_client(dev_settings):
    """Test client for an app running in DEV mode."""
    return TestClient(create_app(dev_settings))


# Markers for different test types
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
