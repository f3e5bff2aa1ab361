"""
Time arithmetic for track listings.

Offsets arrive as ``M:S`` or ``H:M:S`` strings. They are normalized into
``TimeSpan`` values (hours folded into minutes), optionally accumulated from
track lengths into absolute offsets, and finally turned into cut regions.
"""

from decimal import Decimal, InvalidOperation
from itertools import accumulate

from ytdl_album.exceptions import TimecodeError
from ytdl_album.models.track import CutRegion, TimeSpan, Track


def parse_timespan(value: str) -> TimeSpan:
    """
    Parses an ``M:S`` or ``H:M:S`` token.

    The number of fields decides the form; field values are never used to guess
    it. Seconds of 60 or more carry into the minutes.

    Raises:
        TimecodeError: If the token is empty, non-numeric, or has the wrong
        number of fields.
    """
    fields = value.strip().split(":")
    if not all(field.isdecimal() for field in fields):
        raise TimecodeError(f"Invalid offset '{value}': expected M:S or H:M:S.")

    numbers = [int(field) for field in fields]
    if len(numbers) == 3:
        hours, minutes, seconds = numbers
        minutes += hours * 60
    elif len(numbers) == 2:
        minutes, seconds = numbers
    else:
        raise TimecodeError(f"Invalid offset '{value}': expected M:S or H:M:S.")

    return TimeSpan.from_seconds(minutes * 60 + seconds)


def normalize(value: str) -> str:
    """Returns the ``MM:SS`` form of an offset token."""
    return str(parse_timespan(value))


def normalize_tracks(records: list[tuple[str, str]]) -> list[Track]:
    """Converts raw ``(offset, title)`` records into tracks."""
    return [Track(parse_timespan(offset), title.strip()) for offset, title in records]


def lengths_to_offsets(tracks: list[Track]) -> list[Track]:
    """
    Treats each track's offset as its length and derives absolute offsets.

    The first track starts at ``00:00``; each following track starts where the
    running total of the previous lengths ends.
    """
    starts = accumulate(
        (track.offset for track in tracks[:-1]), initial=TimeSpan()
    )
    return [Track(start, track.title) for start, track in zip(starts, tracks)]


def parse_duration(value: str) -> TimeSpan:
    """
    Converts a probe duration in seconds (``SS.sss``) to a ``TimeSpan``.

    Sub-second precision is truncated.
    """
    try:
        seconds = Decimal(value.strip())
    except InvalidOperation as e:
        raise TimecodeError(f"Invalid duration '{value}'.") from e
    if not seconds.is_finite():
        raise TimecodeError(f"Invalid duration '{value}'.")
    return TimeSpan.from_seconds(int(seconds))


def cut_regions(tracks: list[Track], total: TimeSpan) -> list[CutRegion]:
    """
    Pairs each track with the time until the next one starts.

    The last track runs to ``total``. Durations are not clamped: an offset past
    the album end, or out-of-order offsets, produce zero or negative durations
    that the splitter has to deal with.
    """
    ends = [track.offset for track in tracks[1:]] + [total]
    return [
        CutRegion(start=track.offset, duration=end - track.offset, title=track.title)
        for track, end in zip(tracks, ends)
    ]
