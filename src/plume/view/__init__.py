"""Cursor and scroll state."""

from .viewport import ARROW_DIRECTIONS, Viewport, ViewportSnapshot

__all__ = ["ARROW_DIRECTIONS", "Viewport", "ViewportSnapshot"]
