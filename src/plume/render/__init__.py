"""Screen composition."""

from .draw_buffer import ByteSink, DrawBuffer
from .screen import ScreenRenderer

__all__ = ["ByteSink", "DrawBuffer", "ScreenRenderer"]
