"""
Pydantic model for application configuration.
Provides robust validation for all settings.
"""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

DEFAULT_TRACK_FORMAT = "%t %o"
DEFAULT_TITLE_FORMAT = "%p - %a"

DEFAULT_DOWNLOADER = "yt-dlp"
DEFAULT_DOWNLOADER_ARGS = ["-x", "--no-mtime", "-o", "%(title)s.%(ext)s"]


class AlbumConfig(BaseModel):
    """A validated configuration model for one album run."""

    # Extraction
    track_format: str = DEFAULT_TRACK_FORMAT
    title_format: str = DEFAULT_TITLE_FORMAT
    offsets_are_lengths: bool = False
    use_description: bool = True

    # Output
    split_tracks: bool = False
    tag_tracks: bool = True
    overwrite: bool = False
    dry_run: bool = False
    output_dir: Path = Field(default_factory=Path.cwd)

    # External tools
    downloader: str = DEFAULT_DOWNLOADER
    downloader_args: list[str] = Field(
        default_factory=lambda: list(DEFAULT_DOWNLOADER_ARGS)
    )
    ffmpeg: str = "ffmpeg"
    ffprobe: str = "ffprobe"

    class Config:
        """Pydantic model configuration."""

        validate_assignment = True

    @field_validator("track_format", "title_format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Rejects blank templates; they would silently match every line."""
        if not v or not v.strip():
            raise ValueError("Format strings cannot be empty.")
        return v

    @field_validator("downloader", "ffmpeg", "ffprobe")
    @classmethod
    def validate_executable(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Executable names cannot be empty.")
        return v

    @classmethod
    def get_ini_keys(cls) -> set[str]:
        """Returns a set of all keys that are expected in the INI file."""
        internal_fields = {
            "dry_run",
            "output_dir",
            "downloader_args",
        }
        return {key for key in cls.model_fields if key not in internal_fields}
