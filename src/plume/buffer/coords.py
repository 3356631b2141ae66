"""Conversions between buffer columns and render columns.

A row's render form expands every tab to spaces up to the next multiple of
``tab_stop``; every other byte occupies exactly one cell. These helpers are
pure and take the raw row bytes so they can be used without a Row instance.
"""

from __future__ import annotations

TAB = 0x09
DEFAULT_TAB_STOP = 8


def buffer_col_to_render_col(
    chars: bytes | bytearray, cx: int, *, tab_stop: int = DEFAULT_TAB_STOP
) -> int:
    rx = 0
    for byte in chars[:cx]:
        if byte == TAB:
            rx += (tab_stop - 1) - (rx % tab_stop)
        rx += 1
    return rx


def render_col_to_buffer_col(
    chars: bytes | bytearray, rx: int, *, tab_stop: int = DEFAULT_TAB_STOP
) -> int:
    """Return the buffer index whose cell span covers render column ``rx``.

    Columns past the rendered line map to ``len(chars)``.
    """

    cur_rx = 0
    for cx, byte in enumerate(chars):
        if byte == TAB:
            cur_rx += (tab_stop - 1) - (cur_rx % tab_stop)
        cur_rx += 1
        if cur_rx > rx:
            return cx
    return len(chars)


def expand_tabs(chars: bytes | bytearray, *, tab_stop: int = DEFAULT_TAB_STOP) -> bytes:
    out = bytearray()
    for byte in chars:
        if byte == TAB:
            out.append(0x20)
            while len(out) % tab_stop:
                out.append(0x20)
        else:
            out.append(byte)
    return bytes(out)


__all__ = [
    "DEFAULT_TAB_STOP",
    "TAB",
    "buffer_col_to_render_col",
    "render_col_to_buffer_col",
    "expand_tabs",
]
