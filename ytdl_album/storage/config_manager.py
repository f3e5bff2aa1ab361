"""
Manages loading, validation, and saving of the INI configuration file.
"""

import configparser
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ytdl_album.exceptions import ConfigurationError
from ytdl_album.models.config import AlbumConfig

log = logging.getLogger(__name__)

BOOLEAN_KEYS = (
    "split_tracks",
    "use_description",
    "offsets_are_lengths",
    "tag_tracks",
    "overwrite",
)
STRING_KEYS = ("track_format", "title_format", "downloader", "ffmpeg", "ffprobe")


class ConfigManager:
    """Handles all operations related to the application's INI config file."""

    def __init__(self, config_file_path: Path):
        self.config_file_path = config_file_path
        # Format strings use '%', so interpolation must stay off.
        self._parser = configparser.ConfigParser(interpolation=None)

    def load_config(self, cli_options: dict[str, Any] | None = None) -> AlbumConfig:
        """
        Loads configuration from the INI file, applies CLI overrides, and validates it.

        A missing file is not an error; built-in defaults are used instead.

        Args:
            cli_options: A dictionary of options provided via the command line.

        Returns:
            A validated AlbumConfig object.

        Raises:
            ConfigurationError: If the config file is invalid or validation fails.
        """
        config_from_file: dict[str, Any] = {}
        if self.config_file_path.is_file():
            try:
                self._parser.read(self.config_file_path, encoding="utf-8")
                config_from_file = self._get_config_as_dict()
            except (configparser.Error, ValueError) as e:
                raise ConfigurationError(
                    f"Error parsing configuration file: {e}"
                ) from e
        else:
            log.debug(f"No configuration file at '{self.config_file_path}'.")

        # Override with CLI options
        if cli_options:
            config_from_file.update(cli_options)

        try:
            return AlbumConfig(**config_from_file)
        except ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed:\n{e}") from e

    def save_new_config(self, settings: dict[str, Any] | None = None) -> None:
        """
        Creates and saves a new configuration file from defaults and ``settings``.
        """
        settings = settings or {}
        config = configparser.ConfigParser(interpolation=None)
        config["DEFAULT"] = {}
        defaults = AlbumConfig()

        for key in sorted(AlbumConfig.get_ini_keys()):
            value = settings.get(key, getattr(defaults, key))
            if isinstance(value, bool):
                config["DEFAULT"][key] = "true" if value else "false"
            else:
                config["DEFAULT"][key] = str(value)

        try:
            self.config_file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_file_path, "w", encoding="utf-8") as configfile:
                config.write(configfile)
        except OSError as e:
            raise ConfigurationError(f"Failed to save configuration file: {e}") from e

    def _get_config_as_dict(self) -> dict[str, Any]:
        """Reads the keys present in the 'DEFAULT' section into a dictionary."""
        section = self._parser["DEFAULT"]
        values: dict[str, Any] = {}
        for key in STRING_KEYS:
            if key in section:
                values[key] = section.get(key)
        for key in BOOLEAN_KEYS:
            if key in section:
                values[key] = section.getboolean(key)
        unknown = set(section) - set(STRING_KEYS) - set(BOOLEAN_KEYS)
        if unknown:
            log.warning(
                f"[yellow]Ignoring unknown configuration keys: "
                f"{', '.join(sorted(unknown))}[/yellow]"
            )
        return values
