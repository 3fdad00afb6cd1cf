"""Tests for settings loading and saving."""

import logging
from pathlib import Path

import pytest
import yaml

from bounded_playlist.config.settings import LoggingConfig, PlaylistConfig, Settings


class TestConfigValidation:
    """Dataclass validation on construction."""

    def test_defaults(self):
        settings = Settings()
        assert settings.playlist.max_size == 20
        assert settings.logging.level == "INFO"
        assert settings.logging.path is None

    def test_negative_max_size_rejected(self):
        with pytest.raises(ValueError, match="max_size"):
            PlaylistConfig(max_size=-1)

    def test_invalid_level_rejected(self):
        with pytest.raises(ValueError, match="level"):
            LoggingConfig(level="LOUD")

    def test_non_string_level_rejected(self):
        with pytest.raises(ValueError, match="level"):
            LoggingConfig(level=10)

    @pytest.mark.parametrize("max_size", ["big", True, 2.5])
    def test_non_integer_max_size_rejected(self, max_size):
        with pytest.raises(ValueError, match="max_size"):
            PlaylistConfig(max_size=max_size)

    def test_level_case_insensitive(self):
        assert LoggingConfig(level="debug").level == "debug"

    def test_path_string_converted(self):
        config = LoggingConfig(path="~/playlist.log")
        assert isinstance(config.path, Path)
        assert "~" not in str(config.path)


class TestSettingsFile:
    """YAML round-trips through the filesystem."""

    def test_from_file(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text(
            "playlist:\n  max_size: 5\nlogging:\n  level: DEBUG\n",
            encoding="utf-8"
        )

        settings = Settings.from_file(config_path)

        assert settings.playlist.max_size == 5
        assert settings.logging.level == "DEBUG"

    def test_from_file_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Settings.from_file(tmp_path / "missing.yaml")

    def test_from_file_empty_uses_defaults(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("", encoding="utf-8")
        assert Settings.from_file(config_path) == Settings()

    def test_from_file_unknown_key(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("playlist:\n  colour: red\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid configuration"):
            Settings.from_file(config_path)

    def test_from_file_not_a_mapping(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(ValueError, match="mapping"):
            Settings.from_file(config_path)

    def test_from_file_or_default_falls_back(self, tmp_path, caplog):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("playlist:\n  max_size: -3\n", encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            settings = Settings.from_file_or_default(config_path)

        assert settings == Settings()
        assert "Using default configuration" in caplog.text

    def test_from_file_non_string_level(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("logging:\n  level: 10\n", encoding="utf-8")

        with pytest.raises(ValueError, match="level"):
            Settings.from_file(config_path)
        assert Settings.from_file_or_default(config_path) == Settings()

    def test_from_file_or_default_missing(self, tmp_path):
        assert Settings.from_file_or_default(tmp_path / "nope.yaml") == Settings()

    def test_default_location(self, tmp_path, monkeypatch):
        monkeypatch.setattr(
            "bounded_playlist.config.settings.get_config_dir",
            lambda: tmp_path
        )
        Settings(playlist=PlaylistConfig(max_size=3)).save()

        assert (tmp_path / "config.yaml").exists()
        assert Settings.from_file_or_default().playlist.max_size == 3

    def test_save_and_reload(self, tmp_path):
        config_path = tmp_path / "nested" / "config.yaml"
        settings = Settings(
            playlist=PlaylistConfig(max_size=8),
            logging=LoggingConfig(path=tmp_path / "log.txt", level="WARNING"),
        )

        settings.save(config_path)

        data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        assert list(data) == ["playlist", "logging"]
        assert Settings.from_file(config_path) == settings
