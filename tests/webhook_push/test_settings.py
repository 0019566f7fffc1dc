"""Tests for CLI settings"""

import pytest

from src.webhook_push.config import CliSettings
from src.webhook_push.errors import SettingsError, UnknownPlatformError


class TestCliSettings:
    """Tests for CliSettings"""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        monkeypatch.delenv("WEBHOOK_DEFAULT_PLATFORM", raising=False)

    def test_defaults(self):
        settings = CliSettings()
        assert settings.default_platform == "wecom"
        assert settings.default_title is None

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text(
            "default_platform: slack\ndefault_title: CI\nlog_level: debug\n",
            encoding="utf-8",
        )

        settings = CliSettings.load(path)

        assert settings.default_platform == "slack"
        assert settings.default_title == "CI"
        assert settings.log_level == "DEBUG"

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("", encoding="utf-8")

        assert CliSettings.from_yaml(path) == CliSettings()

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        path = tmp_path / "settings.yaml"
        path.write_text("default_platform: slack\n", encoding="utf-8")
        monkeypatch.setenv("WEBHOOK_DEFAULT_PLATFORM", "telegram")

        assert CliSettings.load(path).default_platform == "telegram"

    def test_invalid_platform(self):
        with pytest.raises(UnknownPlatformError):
            CliSettings.from_dict({"default_platform": "discord"})

    @pytest.mark.parametrize("text", ["- wecom\n- slack\n", "just a string\n"])
    def test_non_mapping_yaml(self, tmp_path, text):
        path = tmp_path / "settings.yaml"
        path.write_text(text, encoding="utf-8")

        with pytest.raises(SettingsError, match="mapping"):
            CliSettings.from_yaml(path)
