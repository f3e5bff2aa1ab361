"""
Runs the external downloader (yt-dlp or youtube-dl) and reads back which files it wrote.

The downloader's log is the only source for the output paths: it announces the
description file and the audio file on lines with fixed shapes. Nothing
outside this module looks at raw downloader output.
"""

import logging
import re
import subprocess
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from ytdl_album.exceptions import DownloadError

log = logging.getLogger(__name__)

DESCRIPTION_PATTERNS = (
    re.compile(r"^\[info\] Writing video description to: (?P<path>.+)$"),
)
# Audio extraction output, preferred when present.
EXTRACT_PATTERNS = (
    re.compile(r"^\[ExtractAudio\] Destination: (?P<path>.+)$"),  # yt-dlp
    re.compile(r"^\[ffmpeg\] Destination: (?P<path>.+)$"),  # youtube-dl
    re.compile(
        r"^\[ExtractAudio\] Not converting audio (?P<path>.+); "
        r"(?:the )?file is already in"
    ),
)
# The downloaded file itself, used when extraction announced nothing.
DOWNLOAD_PATTERNS = (
    re.compile(r"^\[download\] Destination: (?P<path>.+)$"),
    re.compile(r"^\[download\] (?P<path>.+) has already been downloaded"),
)


@dataclass
class DownloadResult:
    """Paths announced by the downloader."""

    media_path: Path
    description_path: Path | None = None
    output_lines: list[str] = field(default_factory=list, repr=False)

    def read_description(self) -> str:
        if self.description_path is None:
            raise DownloadError("The downloader did not write a description file.")
        try:
            return self.description_path.read_text(encoding="utf-8")
        except OSError as e:
            raise DownloadError(
                f"Could not read description file '{self.description_path}': {e}"
            ) from e


def _find_announcement(
    lines: list[str], patterns: tuple[re.Pattern, ...]
) -> str | None:
    """Returns the path from the last line matching one of ``patterns``."""
    found = None
    for line in lines:
        for pattern in patterns:
            if match := pattern.match(line):
                found = match["path"].strip()
    return found


def parse_announcements(
    lines: list[str], base_dir: Path, expect_description: bool = True
) -> DownloadResult:
    """
    Builds a ``DownloadResult`` from downloader output.

    The audio file is taken from the extraction step when it announced one,
    otherwise from the download step.

    Raises:
        DownloadError: If the media file (or, when expected, the description
        file) was never announced.
    """
    media = _find_announcement(lines, EXTRACT_PATTERNS) or _find_announcement(
        lines, DOWNLOAD_PATTERNS
    )
    if not media:
        raise DownloadError(
            "The downloader output did not announce an audio file destination."
        )
    description = _find_announcement(lines, DESCRIPTION_PATTERNS)
    if expect_description and not description:
        raise DownloadError(
            "The downloader output did not announce a description file."
        )
    return DownloadResult(
        media_path=base_dir / media,
        description_path=base_dir / description if description else None,
        output_lines=lines,
    )


class Downloader:
    """Thin wrapper around the downloader executable."""

    def __init__(
        self,
        executable: str,
        args: list[str],
        write_description: bool = True,
        console: Console | None = None,
    ):
        self.executable = executable
        self.args = list(args)
        self.write_description = write_description
        self.console = console or Console()

    def build_command(self, url: str) -> list[str]:
        cmd = [self.executable, *self.args]
        if self.write_description:
            cmd.append("--write-description")
        cmd.append(url)
        return cmd

    def download(self, url: str, output_dir: Path) -> DownloadResult:
        """
        Downloads ``url`` into ``output_dir``, echoing the downloader's output.

        Raises:
            DownloadError: If the downloader cannot be started, exits with an
            error, or does not announce its output files.
        """
        cmd = self.build_command(url)
        log.debug(f"Running downloader: {cmd}")
        lines: list[str] = []
        try:
            with subprocess.Popen(
                cmd,
                cwd=output_dir,
                stdout=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
            ) as proc:
                for raw_line in proc.stdout:
                    line = raw_line.rstrip("\r\n")
                    lines.append(line)
                    self.console.print(f"[dim]{escape(line)}[/dim]", highlight=False)
                returncode = proc.wait()
        except OSError as e:
            raise DownloadError(f"Failed to download album: '{url}' ({e})") from e

        if returncode != 0:
            raise DownloadError(
                f"Failed to download album: '{url}' "
                f"({self.executable} exited with code {returncode})"
            )

        try:
            return parse_announcements(lines, output_dir, self.write_description)
        except DownloadError as e:
            raise DownloadError(f"Failed to download album: '{url}' ({e})") from e
