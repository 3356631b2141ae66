"""Key events and the terminal input decoder."""

from .decoder import ByteSource, InputDecoder
from .models import Key, ctrl

__all__ = ["ByteSource", "InputDecoder", "Key", "ctrl"]
