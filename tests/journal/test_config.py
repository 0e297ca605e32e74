"""Tests for teatime.journal.config."""

import os

import pytest

from teatime.core.config import Config
from teatime.core.exceptions import ConfigurationError
from teatime.journal.config import JournalSettings


class TestJournalSettings:
    def test_defaults(self):
        settings = JournalSettings()
        assert settings.editor == ""
        assert settings.render_markdown is True
        assert settings.show_reminders is True

    def test_custom_values(self):
        settings = JournalSettings(editor="nano", show_reminders=False)
        assert settings.editor == "nano"
        assert settings.show_reminders is False

    def test_from_default_config(self, monkeypatch):
        for key in list(os.environ):
            if key.startswith("TEATIME_"):
                monkeypatch.delenv(key)
        settings = JournalSettings.from_config(Config())
        assert settings == JournalSettings()

    def test_from_config_file(self, tmp_config_file):
        settings = JournalSettings.from_config(Config(config_file=tmp_config_file))
        assert settings.editor == "vim"
        assert settings.render_markdown is False
        assert settings.show_reminders is True

    def test_env_strings_become_bools(self, monkeypatch):
        monkeypatch.setenv("TEATIME_DISPLAY__SHOW_REMINDERS", "no")
        settings = JournalSettings.from_config(Config())
        assert settings.show_reminders is False

    def test_bad_bool_raises(self, monkeypatch):
        monkeypatch.setenv("TEATIME_DISPLAY__RENDER_MARKDOWN", "sometimes")
        with pytest.raises(ConfigurationError, match="boolean"):
            JournalSettings.from_config(Config())
