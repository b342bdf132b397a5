"""Tests for settings and logging configuration."""

import pytest
from loguru import logger

from fastapi_conneg import ConfigurationError, negotiate
from fastapi_conneg.config import Settings, get_settings, resolve_available_types
from fastapi_conneg.logging_config import configure_logging


class TestSettings:
    """Environment driven configuration."""

    def test_defaults(self):
        settings = Settings()
        assert settings.ENVIRONMENT == "development"
        assert settings.AVAILABLE_MEDIA_TYPES == ["application/json"]
        assert settings.VARY_ACCEPT is True
        assert settings.STATE_KEY == "content_type"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("CONNEG_VARY_ACCEPT", "false")
        monkeypatch.setenv("CONNEG_STATE_KEY", "negotiated")
        settings = get_settings()
        assert settings.VARY_ACCEPT is False
        assert settings.STATE_KEY == "negotiated"

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestResolveAvailableTypes:
    """Validation of the server preference list."""

    def test_explicit_list_is_copied(self):
        available = ("text/plain", "application/json")
        assert resolve_available_types(available) == ["text/plain", "application/json"]

    def test_defaults_to_settings(self, monkeypatch):
        monkeypatch.setenv("CONNEG_AVAILABLE_MEDIA_TYPES", '["text/csv"]')
        assert resolve_available_types(None) == ["text/csv"]

    def test_empty_list_rejected(self):
        with pytest.raises(ConfigurationError):
            resolve_available_types([])

    def test_malformed_entries_are_kept(self):
        assert resolve_available_types(["json", "text/plain"]) == ["json", "text/plain"]


class TestConfigureLogging:
    """Package logging is enabled on demand."""

    def test_logs_discarded_tokens(self):
        messages: list[str] = []
        configure_logging("development", "DEBUG")
        handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
        try:
            negotiate("text/html;q=abc", ["text/plain"])
        finally:
            logger.remove(handler_id)
            logger.disable("fastapi_conneg")
        assert any("invalid quality" in message for message in messages)
