"""Tests for configuration loading and validation."""

from pathlib import Path

import pytest

from ytdl_album.exceptions import ConfigurationError
from ytdl_album.models.config import DEFAULT_TITLE_FORMAT, DEFAULT_TRACK_FORMAT, AlbumConfig
from ytdl_album.storage.config_manager import ConfigManager


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    return tmp_path / "ytdl-album" / "config.ini"


def test_missing_file_uses_defaults(config_file: Path):
    config = ConfigManager(config_file).load_config()
    assert config.track_format == DEFAULT_TRACK_FORMAT
    assert config.title_format == DEFAULT_TITLE_FORMAT
    assert config.use_description is True
    assert config.split_tracks is False
    assert config.downloader == "yt-dlp"


def test_file_values_are_loaded_without_interpolation(config_file: Path):
    config_file.parent.mkdir(parents=True)
    config_file.write_text(
        "[DEFAULT]\n"
        "track_format = %o - %t\n"
        "split_tracks = yes\n"
        "downloader = youtube-dl\n",
        encoding="utf-8",
    )
    config = ConfigManager(config_file).load_config()
    assert config.track_format == "%o - %t"
    assert config.split_tracks is True
    assert config.downloader == "youtube-dl"


def test_cli_options_override_file(config_file: Path):
    config_file.parent.mkdir(parents=True)
    config_file.write_text("[DEFAULT]\nsplit_tracks = true\n", encoding="utf-8")
    config = ConfigManager(config_file).load_config({"split_tracks": False})
    assert config.split_tracks is False


def test_invalid_boolean_raises(config_file: Path):
    config_file.parent.mkdir(parents=True)
    config_file.write_text("[DEFAULT]\noverwrite = maybe\n", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="parsing"):
        ConfigManager(config_file).load_config()


def test_empty_format_fails_validation(config_file: Path):
    with pytest.raises(ConfigurationError, match="validation failed"):
        ConfigManager(config_file).load_config({"track_format": "   "})


def test_save_new_config_round_trips(config_file: Path):
    manager = ConfigManager(config_file)
    manager.save_new_config({"title_format": "%a by %p"})

    assert config_file.is_file()
    config = ConfigManager(config_file).load_config()
    assert config.title_format == "%a by %p"
    assert config.track_format == DEFAULT_TRACK_FORMAT
    assert config.tag_tracks is True


def test_ini_keys_exclude_internal_fields():
    keys = AlbumConfig.get_ini_keys()
    assert "track_format" in keys
    assert "dry_run" not in keys
    assert "downloader_args" not in keys
    assert "output_dir" not in keys


def test_every_field_is_either_ini_backed_or_run_scoped():
    run_scoped = {"dry_run", "output_dir", "downloader_args"}
    assert set(AlbumConfig.model_fields) == AlbumConfig.get_ini_keys() | run_scoped


def test_cli_options_for_unknown_fields_are_not_kept(config_file: Path):
    config = ConfigManager(config_file).load_config({"source_url": "abc123"})
    assert "source_url" not in config.model_dump()
