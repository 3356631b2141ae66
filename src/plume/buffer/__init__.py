"""Line storage: rows, the text buffer, and column mapping."""

from .coords import (
    DEFAULT_TAB_STOP,
    buffer_col_to_render_col,
    expand_tabs,
    render_col_to_buffer_col,
)
from .row import Row
from .text_buffer import Cursor, TextBuffer

__all__ = [
    "Cursor",
    "DEFAULT_TAB_STOP",
    "Row",
    "TextBuffer",
    "buffer_col_to_render_col",
    "expand_tabs",
    "render_col_to_buffer_col",
]
