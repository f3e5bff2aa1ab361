"""
Shared fixtures for the ytdl-album tests.
"""

import io
from pathlib import Path

import pytest
from rich.console import Console

from ytdl_album.media.downloader import DownloadResult
from ytdl_album.models.config import AlbumConfig

SAMPLE_DESCRIPTION = """Full album stream, enjoy!

Tracklist:
Intro 0:00
The Long Song 3:15
Finale 1:02:03

Follow us on social media.
"""


class FakeDownloader:
    """Stands in for yt-dlp: writes the description and announces an audio file."""

    def __init__(self, media_name: str, description: str | None = SAMPLE_DESCRIPTION):
        self.media_name = media_name
        self.description = description
        self.calls: list[tuple[str, Path]] = []

    def download(self, url: str, output_dir: Path) -> DownloadResult:
        self.calls.append((url, output_dir))
        media_path = output_dir / self.media_name
        media_path.write_bytes(b"")
        description_path = None
        if self.description is not None:
            description_path = output_dir / f"{media_path.stem}.description"
            description_path.write_text(self.description, encoding="utf-8")
        return DownloadResult(media_path=media_path, description_path=description_path)


@pytest.fixture
def quiet_console() -> Console:
    """A console that writes into a buffer instead of the terminal."""
    return Console(file=io.StringIO(), width=120)


@pytest.fixture
def make_config(tmp_path: Path):
    """Builds an AlbumConfig writing into the test's temporary directory."""

    def _make(**overrides) -> AlbumConfig:
        overrides.setdefault("output_dir", tmp_path)
        return AlbumConfig(**overrides)

    return _make
