"""
Data Models Layer.

This package contains the Pydantic configuration model and the value types
that flow through the pipeline.
"""

from .config import AlbumConfig
from .stats import AlbumResult
from .track import AlbumMeta, CutRegion, TimeSpan, Track

__all__ = ["AlbumConfig", "AlbumMeta", "AlbumResult", "CutRegion", "TimeSpan", "Track"]
