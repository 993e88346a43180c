"""
Pytest configuration and shared fixtures for the checksum service tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers and settings
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

# Get the project root (parent of tests/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent

if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from fastapi.testclient import TestClient

from api.app import create_app
from core.config.runtime import RuntimeConfig, set_default_config


ENV_VARS = [
    "SSLSERVER_HOST",
    "SSLSERVER_PORT",
    "SSLSERVER_TLS_CERT_FILE",
    "SSLSERVER_TLS_KEY_FILE",
    "SSLSERVER_TLS_KEY_PASSWORD",
    "SSLSERVER_LOG_LEVEL",
    "SSLSERVER_LOG_FILE",
    "SSLSERVER_SECURITY_HEADERS",
    "SSLSERVER_CORS_ORIGINS",
]


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def clean_env(monkeypatch):
    """Remove SSLSERVER_* variables so tests see default configuration."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield monkeypatch
    set_default_config(None)


@pytest.fixture
def config():
    """Provide a default RuntimeConfig."""
    return RuntimeConfig()


@pytest.fixture
def app(config):
    """Provide an application built from the default config."""
    return create_app(config)


@pytest.fixture
def client(app):
    """Provide a TestClient for the application."""
    return TestClient(app)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
