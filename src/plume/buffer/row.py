"""Single line of text plus its cached render form."""

from __future__ import annotations

from .coords import (
    DEFAULT_TAB_STOP,
    buffer_col_to_render_col,
    expand_tabs,
    render_col_to_buffer_col,
)


class Row:
    """One line of raw bytes (no newline) and its tab-expanded render.

    ``characters`` is only mutated through the methods below, and each of
    them rebuilds ``render`` before returning.
    """

    __slots__ = ("_chars", "_render", "tab_stop")

    def __init__(self, content: bytes = b"", *, tab_stop: int = DEFAULT_TAB_STOP) -> None:
        self.tab_stop = tab_stop
        self._chars = bytearray(content)
        self._render = b""
        self._update_render()

    def __repr__(self) -> str:
        return f"Row({bytes(self._chars)!r})"

    def __len__(self) -> int:
        return len(self._chars)

    @property
    def size(self) -> int:
        return len(self._chars)

    @property
    def characters(self) -> bytes:
        return bytes(self._chars)

    @property
    def render(self) -> bytes:
        return self._render

    def cx_to_rx(self, cx: int) -> int:
        return buffer_col_to_render_col(self._chars, cx, tab_stop=self.tab_stop)

    def rx_to_cx(self, rx: int) -> int:
        return render_col_to_buffer_col(self._chars, rx, tab_stop=self.tab_stop)

    def insert(self, at: int, byte: int) -> bool:
        if at < 0 or at > len(self._chars):
            return False
        self._chars.insert(at, byte)
        self._update_render()
        return True

    def delete(self, at: int) -> bool:
        if at < 0 or at >= len(self._chars):
            return False
        del self._chars[at]
        self._update_render()
        return True

    def append(self, content: bytes) -> None:
        self._chars.extend(content)
        self._update_render()

    def truncate(self, size: int) -> bytes:
        """Cut the row at ``size`` and return the removed tail."""

        tail = bytes(self._chars[size:])
        del self._chars[size:]
        self._update_render()
        return tail

    def _update_render(self) -> None:
        self._render = expand_tabs(self._chars, tab_stop=self.tab_stop)


__all__ = ["Row"]
