"""Fixtures for infrastructure.logging tests."""

import pytest
import structlog
from unittest.mock import Mock

from infrastructure.configuration import Settings


@pytest.fixture
def mock_settings():
    """Mock Settings instance for a development deployment."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "INFO"
    settings.is_production = False
    return settings


@pytest.fixture
def production_settings(mock_settings):
    """Mock Settings instance for a production deployment."""
    mock_settings.LOG_LEVEL = "WARNING"
    mock_settings.is_production = True
    return mock_settings


@pytest.fixture(autouse=True)
def clean_contextvars():
    """Ensure no context leaks between tests."""
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()
