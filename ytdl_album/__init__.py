"""
ytdl-album: download an album from a video site and write a cuesheet or split tracks.
"""

__version__ = "1.0.0"
