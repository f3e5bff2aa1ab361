"""
Dataclass summarizing the outcome of one album run.
"""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class AlbumResult:
    """Collects what a run produced, for the final summary panel."""

    album: str = ""
    performer: str = ""
    media_path: Path | None = None
    tracks_found: int = 0
    cuesheet_path: Path | None = None
    files_written: list[Path] = field(default_factory=list)
    files_tagged: int = 0
    dry_run: bool = False
    elapsed_s: float = 0.0

    @property
    def mode(self) -> str:
        if self.dry_run:
            return "dry run"
        return "cuesheet" if self.cuesheet_path else "split"
