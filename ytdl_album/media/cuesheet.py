"""
Renders and writes cuesheets for a single album file.
"""

import logging
from pathlib import Path

from ytdl_album.models.track import AlbumMeta, Track
from ytdl_album.utils.path import cuesheet_filename

log = logging.getLogger(__name__)

# Players mostly ignore the FILE type; these are the values the format defines.
FILE_TYPES = {
    ".mp3": "MP3",
    ".aif": "AIFF",
    ".aiff": "AIFF",
}


def cue_file_type(media_name: str) -> str:
    return FILE_TYPES.get(Path(media_name).suffix.lower(), "WAVE")


def render_cuesheet(meta: AlbumMeta, media_name: str, tracks: list[Track]) -> str:
    """
    Builds the cuesheet text: one header block, then one block per track.

    Track numbers are 1-based and two digits wide; every index point is at
    frame 00.
    """
    lines = [
        f'FILE "{media_name}" {cue_file_type(media_name)}',
        f'TITLE "{meta.album}"',
        f'PERFORMER "{meta.performer}"',
    ]
    for number, track in enumerate(tracks, start=1):
        lines.extend(
            [
                f"\tTRACK {number:02d} AUDIO",
                f"\t\tINDEX 01 {track.offset}:00",
                f'\t\tTITLE "{track.title}"',
            ]
        )
    return "\n".join(lines) + "\n"


def write_cuesheet(
    meta: AlbumMeta,
    media_path: Path,
    tracks: list[Track],
    output_dir: Path,
    overwrite: bool = False,
) -> Path:
    """
    Writes ``"{performer} - {album}.cue"`` next to the album file.

    The text is rendered before the file is opened, so a failure leaves no
    partial cuesheet behind.
    """
    content = render_cuesheet(meta, media_path.name, tracks)
    cue_path = output_dir / cuesheet_filename(meta)
    if cue_path.exists() and not overwrite:
        raise FileExistsError(f"Cuesheet already exists: '{cue_path}'")

    log.info(f"Writing cuesheet: '{cue_path.name}'...")
    cue_path.write_text(content, encoding="utf-8")
    return cue_path
