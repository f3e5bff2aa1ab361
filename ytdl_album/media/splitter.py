"""
Cuts the album file into per-track files with ffmpeg, copying the audio stream.
"""

import logging
import subprocess
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from ytdl_album.exceptions import DegenerateRegionError, SplitError
from ytdl_album.models.track import CutRegion
from ytdl_album.utils.path import media_extension, track_filename

log = logging.getLogger(__name__)


class TrackSplitter:
    """Runs one ffmpeg stream copy per cut region."""

    def __init__(
        self,
        ffmpeg: str = "ffmpeg",
        overwrite: bool = False,
        console: Console | None = None,
    ):
        self.ffmpeg = ffmpeg
        self.overwrite = overwrite
        self.console = console or Console()

    def build_command(
        self, media_path: Path, region: CutRegion, output_path: Path
    ) -> list[str]:
        return [
            self.ffmpeg,
            "-hide_banner",
            "-loglevel",
            "error",
            "-y" if self.overwrite else "-n",
            "-i",
            str(media_path),
            "-ss",
            str(region.start.total_seconds),
            "-t",
            str(region.duration.total_seconds),
            "-acodec",
            "copy",
            str(output_path),
        ]

    def split(
        self, media_path: Path, regions: list[CutRegion], output_dir: Path
    ) -> list[Path]:
        """
        Writes one ``"NN title.ext"`` file per region, in order.

        Files written before a failing region are kept.

        Raises:
            DegenerateRegionError: If a region has a zero or negative duration.
            FileExistsError: If an output file exists and overwrite is off.
            SplitError: If ffmpeg cannot run or fails.
        """
        ext = media_extension(media_path)
        written: list[Path] = []

        for number, region in enumerate(regions, start=1):
            if region.duration.total_seconds <= 0:
                raise DegenerateRegionError(region.title, region.start, region.duration)

            output_path = output_dir / track_filename(number, region.title, ext)
            if output_path.exists() and not self.overwrite:
                raise FileExistsError(f"Output file already exists: '{output_path}'")

            self.console.print(
                f"  [cyan]→[/cyan] Task {number} of {len(regions)}: "
                f"{escape(output_path.name)} "
                f"[dim]({region.start} +{region.duration})[/dim]"
            )
            cmd = self.build_command(media_path, region, output_path)
            log.debug(f"Running ffmpeg: {cmd}")
            try:
                subprocess.run(cmd, check=True)
            except FileNotFoundError as e:
                raise SplitError(f"{self.ffmpeg} not found in PATH") from e
            except subprocess.CalledProcessError as e:
                raise SplitError(
                    f"{self.ffmpeg} failed on '{output_path.name}' "
                    f"with exit code {e.returncode}"
                ) from e
            written.append(output_path)

        return written
