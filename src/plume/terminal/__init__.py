"""Thin OS wrappers around the controlling terminal."""

from .geometry import query_window_size
from .io import FdByteSink, FdByteSource
from .raw_mode import RawMode

__all__ = ["FdByteSink", "FdByteSource", "RawMode", "query_window_size"]
