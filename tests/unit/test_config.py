"""Unit tests for configuration and logging setup."""

import pytest
from structlog.testing import capture_logs

from mailto_uri import configure_logging
from mailto_uri.config import Settings, get_settings


class TestSettings:
    """Test suite for Settings class."""

    def test_default_settings(self) -> None:
        """Test that default settings are properly initialized."""
        settings = Settings()

        assert settings.log_level == "INFO"
        assert settings.debug is False

    def test_settings_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test loading settings from environment variables."""
        monkeypatch.setenv("MAILTO_URI_LOG_LEVEL", "WARNING")
        monkeypatch.setenv("MAILTO_URI_DEBUG", "true")

        settings = get_settings()

        assert settings.log_level == "WARNING"
        assert settings.debug is True

    def test_get_settings_returns_cached_instance(self) -> None:
        """Test that get_settings returns the same cached instance."""
        settings1 = get_settings()
        settings2 = get_settings()

        assert settings1 is settings2


class TestConfigureLogging:
    """Test suite for configure_logging."""

    def test_uses_settings_level(self) -> None:
        """Test that the configured level is applied."""
        assert configure_logging(Settings(log_level="warning")) == "WARNING"

    def test_debug_forces_debug_level(self, mock_settings) -> None:
        """Test that debug mode overrides the level."""
        assert configure_logging(mock_settings) == "DEBUG"

    def test_defaults_to_cached_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that settings come from the environment when omitted."""
        monkeypatch.setenv("MAILTO_URI_LOG_LEVEL", "ERROR")

        assert configure_logging() == "ERROR"

    def test_unknown_level_raises(self) -> None:
        """Test that an unknown level name is rejected."""
        with pytest.raises(ValueError):
            configure_logging(Settings(log_level="LOUD"))

    def test_emits_configured_event(self) -> None:
        """Test that configuring logging reports the applied level."""
        with capture_logs() as logs:
            configure_logging(Settings(log_level="INFO"))

        assert logs == [
            {"event": "logging_configured", "level": "INFO", "log_level": "info"}
        ]
