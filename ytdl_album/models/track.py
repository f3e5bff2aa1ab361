"""
Value types shared by the extraction and time-arithmetic pipeline.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TimeSpan:
    """
    A position or duration in minutes and seconds, with hours folded into minutes.

    Seconds always lie in [0, 59]. A negative span (only produced by subtraction)
    keeps that invariant by carrying the sign in the minutes, the same way
    ``divmod`` does.
    """

    minutes: int = 0
    seconds: int = 0

    @classmethod
    def from_seconds(cls, total: int) -> "TimeSpan":
        minutes, seconds = divmod(total, 60)
        return cls(minutes, seconds)

    @property
    def total_seconds(self) -> int:
        return self.minutes * 60 + self.seconds

    def __add__(self, other: "TimeSpan") -> "TimeSpan":
        return TimeSpan.from_seconds(self.total_seconds + other.total_seconds)

    def __sub__(self, other: "TimeSpan") -> "TimeSpan":
        return TimeSpan.from_seconds(self.total_seconds - other.total_seconds)

    def __str__(self) -> str:
        if self.total_seconds < 0:
            return f"-{TimeSpan.from_seconds(-self.total_seconds)}"
        return f"{self.minutes:02d}:{self.seconds:02d}"


@dataclass(frozen=True)
class Track:
    """A single entry of the album's track listing."""

    offset: TimeSpan
    title: str


@dataclass(frozen=True)
class AlbumMeta:
    album: str = ""
    performer: str = ""


@dataclass(frozen=True)
class CutRegion:
    """The slice of the album file that becomes one split track."""

    start: TimeSpan
    duration: TimeSpan
    title: str
