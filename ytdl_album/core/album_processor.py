"""
Orchestrates one album run, from download to cuesheet or split files.
"""

import logging
import time
from pathlib import Path
from typing import Callable

from rich.console import Console
from rich.markup import escape

from ytdl_album.cli.formatters import print_tracks_table
from ytdl_album.core.scanner import scan_title, scan_tracks
from ytdl_album.core.timecode import cut_regions, lengths_to_offsets, normalize_tracks
from ytdl_album.exceptions import ConfigurationError
from ytdl_album.media import Downloader, Tagger, TrackSplitter, probe_duration
from ytdl_album.media.cuesheet import write_cuesheet
from ytdl_album.models.config import AlbumConfig
from ytdl_album.models.stats import AlbumResult
from ytdl_album.models.track import AlbumMeta, TimeSpan, Track
from ytdl_album.utils.path import create_dir

log = logging.getLogger(__name__)


def extract_tracks(
    text: str, track_format: str, offsets_are_lengths: bool = False
) -> list[Track]:
    """
    Turns a description into an ordered track list with absolute offsets.

    Raises:
        NoTracksFoundError: If the track format matches no line of ``text``.
        TimecodeError: If a captured offset is malformed.
    """
    tracks = normalize_tracks(scan_tracks(text, track_format))
    if offsets_are_lengths:
        tracks = lengths_to_offsets(tracks)
    return tracks


class AlbumProcessor:
    """
    Runs the sequential pipeline for a single URL.

    Collaborators are injectable so the pipeline can run without the external
    tools installed.
    """

    def __init__(
        self,
        config: AlbumConfig,
        console: Console | None = None,
        downloader: Downloader | None = None,
        splitter: TrackSplitter | None = None,
        tagger: Tagger | None = None,
        duration_probe: Callable[[Path, str], TimeSpan] = probe_duration,
    ):
        self.config = config
        self.console = console or Console()
        self.downloader = downloader or Downloader(
            config.downloader,
            config.downloader_args,
            write_description=config.use_description,
            console=self.console,
        )
        self.splitter = splitter or TrackSplitter(
            config.ffmpeg, overwrite=config.overwrite, console=self.console
        )
        self.tagger = tagger or Tagger()
        self.duration_probe = duration_probe

    def run(self, url: str, description: str | None = None) -> AlbumResult:
        """
        Downloads ``url`` and writes the cuesheet or split tracks.

        Args:
            url: The video URL or id handed to the downloader.
            description: Track listing text to use instead of the downloaded
                description (required when ``use_description`` is off).
        """
        start_time = time.monotonic()
        output_dir = self.config.output_dir
        create_dir(output_dir)

        self.console.print(f"[bold cyan]🎵 Downloading '{escape(url)}'...[/bold cyan]")
        download = self.downloader.download(url, output_dir)

        if self.config.use_description:
            description = download.read_description()
        elif description is None:
            raise ConfigurationError(
                "A track listing text is required when the description is not used."
            )

        tracks = extract_tracks(
            description, self.config.track_format, self.config.offsets_are_lengths
        )
        meta = scan_title(download.media_path.stem, self.config.title_format)
        log.info(
            f"Found {len(tracks)} track(s) for "
            f"'{escape(meta.performer)} - {escape(meta.album)}'."
        )

        result = AlbumResult(
            album=meta.album,
            performer=meta.performer,
            media_path=download.media_path,
            tracks_found=len(tracks),
            dry_run=self.config.dry_run,
        )

        if self.config.dry_run:
            print_tracks_table(tracks, meta, self.console)
        elif self.config.split_tracks:
            self._split(download.media_path, tracks, meta, result)
        else:
            result.cuesheet_path = write_cuesheet(
                meta,
                download.media_path,
                tracks,
                output_dir,
                overwrite=self.config.overwrite,
            )

        result.elapsed_s = time.monotonic() - start_time
        return result

    def _split(
        self, media_path: Path, tracks: list[Track], meta: AlbumMeta, result: AlbumResult
    ) -> None:
        total = self.duration_probe(media_path, self.config.ffprobe)
        regions = cut_regions(tracks, total)
        self.console.print(
            f"[cyan]Splitting '{escape(media_path.name)}' ({total}) "
            f"into {len(regions)} track(s)...[/cyan]"
        )
        result.files_written = self.splitter.split(
            media_path, regions, self.config.output_dir
        )
        if self.config.tag_tracks:
            result.files_tagged = self.tagger.tag_tracks(
                result.files_written, [region.title for region in regions], meta
            )
