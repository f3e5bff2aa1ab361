"""
Reads the total duration of a media file with ffprobe.
"""

import logging
import subprocess
from pathlib import Path

from ytdl_album.core.timecode import parse_duration
from ytdl_album.exceptions import ProbeError, TimecodeError
from ytdl_album.models.track import TimeSpan

log = logging.getLogger(__name__)


def probe_duration(media_path: Path, ffprobe: str = "ffprobe") -> TimeSpan:
    """
    Returns the duration of ``media_path``, truncated to whole seconds.

    Raises:
        ProbeError: If ffprobe cannot run, fails, or prints no usable number.
    """
    cmd = [
        ffprobe,
        "-v",
        "quiet",
        "-show_entries",
        "format=duration",
        "-of",
        "csv=p=0",
        str(media_path),
    ]
    try:
        result = subprocess.run(cmd, check=True, capture_output=True, text=True)
    except FileNotFoundError as e:
        raise ProbeError(f"{ffprobe} not found in PATH") from e
    except subprocess.CalledProcessError as e:
        raise ProbeError(
            f"{ffprobe} failed on '{media_path}' with exit code {e.returncode}"
        ) from e

    output = result.stdout.strip()
    try:
        duration = parse_duration(output)
    except TimecodeError as e:
        raise ProbeError(
            f"{ffprobe} reported no usable duration for '{media_path}': '{output}'"
        ) from e
    log.debug(f"Album duration of '{media_path.name}': {duration}")
    return duration
