"""
Media Processing Layer.

This package wraps the external tools: the downloader, ffprobe and ffmpeg,
plus cuesheet writing and metadata tagging of split tracks.
"""

from .downloader import Downloader, DownloadResult
from .probe import probe_duration
from .splitter import TrackSplitter
from .tagger import Tagger

__all__ = ["Downloader", "DownloadResult", "Tagger", "TrackSplitter", "probe_duration"]
