"""
Core extraction and time-arithmetic pipeline.

Templates are compiled into patterns, descriptions are scanned into track
lists, offsets are normalized, and the `AlbumProcessor` threads the result
through to the output writers.
"""
