"""
Scans free text line by line with a compiled template pattern.
"""

import logging
import re
from collections.abc import Iterator

from rich.markup import escape

from ytdl_album.core.template import TemplateKind, compile_template, template_groups
from ytdl_album.exceptions import NoTracksFoundError
from ytdl_album.models.track import AlbumMeta

log = logging.getLogger(__name__)


def scan_lines(
    pattern: re.Pattern, text: str, groups: list[str]
) -> Iterator[dict[str, str]]:
    """
    Yields the captured ``groups`` of the first match on each matching line.

    Groups the pattern does not define, or that did not participate in the
    match, come back as empty strings. Output order is line order.
    """
    for line in text.splitlines():
        match = pattern.search(line)
        if not match:
            continue
        captured = match.groupdict()
        yield {name: captured.get(name) or "" for name in groups}


def scan_tracks(text: str, track_format: str) -> list[tuple[str, str]]:
    """
    Extracts raw ``(offset, title)`` pairs from a description.

    Lines that match without capturing an offset or a title are skipped.

    Raises:
        NoTracksFoundError: If no line yields an offset or a title.
    """
    pattern = compile_template(track_format, TemplateKind.TRACK)
    log.debug(f"Track pattern: {escape(pattern.pattern)}")
    records = [
        (record["offset"], record["title"])
        for record in scan_lines(pattern, text, template_groups(TemplateKind.TRACK))
        if record["offset"] or record["title"]
    ]
    if not records:
        raise NoTracksFoundError(track_format, text)
    log.debug(f"Scanned {len(records)} track line(s).")
    return records


def scan_title(name: str, title_format: str) -> AlbumMeta:
    """
    Extracts album and performer from a file name (without extension).

    A name that does not match yields empty fields instead of failing the run.
    """
    pattern = compile_template(title_format, TemplateKind.TITLE)
    for record in scan_lines(pattern, name, template_groups(TemplateKind.TITLE)):
        return AlbumMeta(album=record["album"], performer=record["performer"])

    log.warning(
        f"[yellow]Title format '{escape(title_format)}' did not match "
        f"'{escape(name)}'; "
        "album and performer will be empty.[/yellow]"
    )
    return AlbumMeta()
