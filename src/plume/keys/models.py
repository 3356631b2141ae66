"""Logical key events produced by the input decoder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

CHAR = "char"
ESCAPE = "escape"
ARROW_UP = "up"
ARROW_DOWN = "down"
ARROW_LEFT = "left"
ARROW_RIGHT = "right"
HOME = "home"
END = "end"
DELETE = "delete"
PAGE_UP = "page_up"
PAGE_DOWN = "page_down"

KEY_KINDS = frozenset(
    {
        CHAR,
        ESCAPE,
        ARROW_UP,
        ARROW_DOWN,
        ARROW_LEFT,
        ARROW_RIGHT,
        HOME,
        END,
        DELETE,
        PAGE_UP,
        PAGE_DOWN,
    }
)

TAB_BYTE = 0x09
ENTER_BYTE = 0x0D
ESC_BYTE = 0x1B
BACKSPACE_BYTE = 0x7F

_NAMED_BYTES = {
    TAB_BYTE: "tab",
    ENTER_BYTE: "enter",
    BACKSPACE_BYTE: "backspace",
}


def ctrl(letter: str) -> int:
    """Byte sent by the terminal for Ctrl+``letter``."""

    return ord(letter.lower()) & 0x1F


@dataclass(frozen=True, slots=True)
class Key:
    """Single decoded key press.

    ``byte`` is set for ``CHAR`` keys only and carries the raw byte,
    control chords included.
    """

    kind: str
    byte: Optional[int] = None

    def __post_init__(self) -> None:
        if self.kind not in KEY_KINDS:
            raise ValueError(f"Unknown key kind '{self.kind}'")
        if self.kind == CHAR and (self.byte is None or not 0 <= self.byte <= 0xFF):
            raise ValueError("char keys need a byte value in 0..255")

    @classmethod
    def char(cls, value: int | str) -> "Key":
        byte = ord(value) if isinstance(value, str) else value
        return cls(CHAR, byte)

    @property
    def token(self) -> str:
        """Name used to look the key up in the keymap registry."""

        if self.kind != CHAR:
            return self.kind
        assert self.byte is not None
        named = _NAMED_BYTES.get(self.byte)
        if named:
            return named
        if self.byte < 0x20:
            return f"ctrl+{chr(self.byte | 0x60)}"
        if self.byte >= 0x80:
            return f"byte+{self.byte:02x}"
        return chr(self.byte)

    @property
    def is_printable(self) -> bool:
        return self.kind == CHAR and self.byte is not None and 0x20 <= self.byte < 0x7F

    @property
    def is_insertable(self) -> bool:
        """Printable ASCII, tab, or a raw high byte."""

        if self.kind != CHAR or self.byte is None:
            return False
        return self.is_printable or self.byte == TAB_BYTE or self.byte >= 0x80

    @property
    def is_enter(self) -> bool:
        return self.kind == CHAR and self.byte == ENTER_BYTE

    @property
    def is_backspace(self) -> bool:
        if self.kind == DELETE:
            return True
        return self.kind == CHAR and self.byte in {BACKSPACE_BYTE, ctrl("h")}


__all__ = [
    "ARROW_DOWN",
    "ARROW_LEFT",
    "ARROW_RIGHT",
    "ARROW_UP",
    "BACKSPACE_BYTE",
    "CHAR",
    "DELETE",
    "END",
    "ENTER_BYTE",
    "ESCAPE",
    "ESC_BYTE",
    "HOME",
    "Key",
    "PAGE_DOWN",
    "PAGE_UP",
    "TAB_BYTE",
    "ctrl",
]
