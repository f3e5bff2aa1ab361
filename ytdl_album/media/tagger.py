"""
Writes basic metadata tags to split track files.
"""

import logging
from pathlib import Path

import mutagen
from mutagen import MutagenError

from ytdl_album.models.track import AlbumMeta

log = logging.getLogger(__name__)


class Tagger:
    """Tags split tracks through mutagen's format-independent "easy" interface."""

    def build_tags(
        self, title: str, number: int, total: int, meta: AlbumMeta
    ) -> dict[str, str]:
        tags = {
            "title": title,
            "tracknumber": f"{number}/{total}",
            "album": meta.album,
            "artist": meta.performer,
            "albumartist": meta.performer,
        }
        # Empty album/performer (unmatched title format) are left untagged.
        return {key: value for key, value in tags.items() if value}

    def tag_file(
        self, file_path: Path, title: str, number: int, total: int, meta: AlbumMeta
    ) -> bool:
        try:
            audio = mutagen.File(file_path, easy=True)
            if audio is None:
                log.debug(f"Skipping tags for '{file_path.name}': unsupported format.")
                return False
            if audio.tags is None:
                audio.add_tags()

            for key, value in self.build_tags(title, number, total, meta).items():
                audio[key] = [value]
            audio.save()
            return True
        except (MutagenError, OSError, KeyError, ValueError) as e:
            log.error(
                f"Failed to tag file '{file_path.name}': {e}",
                exc_info=log.getEffectiveLevel() == logging.DEBUG,
            )
            return False

    def tag_tracks(
        self, files: list[Path], titles: list[str], meta: AlbumMeta
    ) -> int:
        """Tags each written file with its title and position; returns the count."""
        total = len(files)
        return sum(
            self.tag_file(path, title, number, total, meta)
            for number, (path, title) in enumerate(zip(files, titles), start=1)
        )
