"""Tests for settings and logging configuration."""

import json

import pytest

from activelabel.config.logging import configure_logging, get_logger
from activelabel.config.settings import Settings, get_settings
from activelabel.core.exceptions import ConfigurationError
from activelabel.core.models import EntityCategory


@pytest.mark.unit
class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.log_level == "WARNING"
        assert settings.log_json is False
        assert settings.detector_set == {
            EntityCategory.URL,
            EntityCategory.HASHTAG,
            EntityCategory.MENTION,
        }

    def test_detector_types_from_env(self, monkeypatch):
        monkeypatch.setenv("ACTIVELABEL_DETECTOR_TYPES", "url, Mention")
        settings = Settings()
        assert settings.detector_types == [EntityCategory.URL, EntityCategory.MENTION]

    def test_none_detector_ignored(self):
        settings = Settings(detector_types=["none", "hashtag", "hashtag"])
        assert settings.detector_types == [EntityCategory.HASHTAG]

    def test_unknown_detector_type(self, monkeypatch):
        monkeypatch.setenv("ACTIVELABEL_DETECTOR_TYPES", "url,phone")
        with pytest.raises(ConfigurationError, match="phone"):
            Settings()

    def test_color_for(self, monkeypatch):
        monkeypatch.setenv("ACTIVELABEL_URL_COLOR", "magenta")
        settings = Settings()
        assert settings.color_for(EntityCategory.URL) == "magenta"
        assert settings.color_for(EntityCategory.MENTION) == "red"
        assert settings.color_for(EntityCategory.NONE) == "reset"

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


@pytest.mark.unit
class TestLogging:
    def test_unknown_level_falls_back(self):
        configure_logging("not-a-level")

    def test_json_output_to_stderr(self, capsys):
        configure_logging("DEBUG", json_output=True)
        get_logger("activelabel.test").info("test.event", answer=42)

        captured = capsys.readouterr()
        assert captured.out == ""
        record = json.loads(captured.err.strip().splitlines()[-1])
        assert record["event"] == "test.event"
        assert record["answer"] == 42
        assert record["level"] == "info"

    def test_level_filters(self, capsys):
        configure_logging("ERROR")
        get_logger("activelabel.test").info("hidden.event")
        assert "hidden.event" not in capsys.readouterr().err
