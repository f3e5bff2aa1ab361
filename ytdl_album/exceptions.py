"""
Defines custom exceptions for the application to allow for more specific error handling.
"""


class YtdlAlbumError(Exception):
    """Base exception for all application-specific errors."""


class ConfigurationError(YtdlAlbumError):
    """Raised for issues related to configuration loading or validation."""


class DownloadError(YtdlAlbumError):
    """Raised when the downloader cannot be run or does not announce its output."""


class TemplateError(YtdlAlbumError):
    """Raised when a format template does not compile into a valid pattern."""


class NoTracksFoundError(YtdlAlbumError):
    """
    Raised when the track template matches no line of the description text.
    """

    def __init__(self, template: str, text: str):
        self.template = template
        self.text = text
        super().__init__(
            f"Didn't get any track information with format: '{template}' "
            f"and description:\n{text}"
        )


class TimecodeError(YtdlAlbumError):
    """Raised when a captured offset is not in M:S or H:M:S form."""


class ProbeError(YtdlAlbumError):
    """Raised when ffprobe fails or reports an unreadable duration."""


class SplitError(YtdlAlbumError):
    """Raised when ffmpeg fails to cut a track out of the album file."""


class DegenerateRegionError(SplitError):
    """Raised when a cut region has a zero or negative duration."""

    def __init__(self, title: str, start, duration):
        self.title = title
        self.start = start
        self.duration = duration
        super().__init__(
            f"Track '{title}' at {start} has a non-positive duration ({duration}). "
            "Check the offsets or use --lengths if they are track lengths."
        )
