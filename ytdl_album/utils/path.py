"""
Utilities for naming the files a run writes.
"""

from pathlib import Path

from pathvalidate import sanitize_filename

from ytdl_album.models.track import AlbumMeta


def create_dir(directory_path: Path) -> None:
    """Creates a directory if it does not already exist."""
    directory_path.mkdir(parents=True, exist_ok=True)


def cuesheet_filename(meta: AlbumMeta) -> str:
    """Returns ``"{performer} - {album}.cue"``, safe on any filesystem."""
    name = f"{meta.performer} - {meta.album}.cue"
    return sanitize_filename(name, platform="universal")


def track_filename(number: int, title: str, ext: str) -> str:
    """Returns ``"NN title.ext"`` for a split track."""
    name = f"{number:02d} {title}"
    if ext:
        name = f"{name}.{ext}"
    return sanitize_filename(name, platform="universal")


def media_extension(media_path: Path) -> str:
    """Returns the album file's extension without the leading dot."""
    return media_path.suffix[1:]
