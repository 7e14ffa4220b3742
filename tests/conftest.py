"""Pytest configuration and shared fixtures."""

import pytest


@pytest.fixture
def mock_settings():
    """Provide mock settings for testing."""
    from mailto_uri.config import Settings

    return Settings(log_level="WARNING", debug=True)


@pytest.fixture
def sample_mailto_uris() -> list[str]:
    """Provide well-formed mailto URIs."""
    return [
        "mailto:chris@example.com",
        "mailto:infobot@example.com?subject=current-issue",
        "mailto:infobot@example.com?body=send%20current-issue",
        "mailto:infobot@example.com?body=send%20current-issue%0D%0Asend%20index",
        "mailto:joe@example.com?cc=bob@example.com&body=hello",
        "mailto:?to=joe@example.com&cc=bob@example.com&body=hello",
    ]


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Keep cached settings from leaking between tests."""
    from mailto_uri.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo configure_logging calls made by a test."""
    import structlog

    yield
    structlog.reset_defaults()
