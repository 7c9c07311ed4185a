"""Shared fixtures for activelabel tests."""

import pytest
import structlog

from activelabel.config.settings import get_settings

DEMO_TEXT = (
    "This is a post with #multiple #hashtags and a @userhandle. "
    "Links are also supported like this one: http://optonaut.co."
)


@pytest.fixture
def demo_text() -> str:
    return DEMO_TEXT


@pytest.fixture(autouse=True)
def _reset_global_state(monkeypatch):
    """Isolate settings cache, environment and structlog config per test."""
    for var in (
        "ACTIVELABEL_LOG_LEVEL",
        "ACTIVELABEL_LOG_JSON",
        "ACTIVELABEL_DETECTOR_TYPES",
        "ACTIVELABEL_MENTION_COLOR",
        "ACTIVELABEL_HASHTAG_COLOR",
        "ACTIVELABEL_URL_COLOR",
    ):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
