"""
Pytest configuration and fixtures for content negotiation tests.
"""

import pytest

from fastapi_conneg.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Re-read settings from the environment for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def available() -> list[str]:
    return ["application/json", "image/png", "text/xml", "text/plain"]
