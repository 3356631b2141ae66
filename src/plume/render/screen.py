"""Frame composition: text rows, status bar, message bar and cursor."""

from __future__ import annotations

import os

from plume import __version__
from plume.runtime import telemetry
from plume.session import EditorSession

from .draw_buffer import ByteSink, DrawBuffer

HIDE_CURSOR = b"\x1b[?25l"
SHOW_CURSOR = b"\x1b[?25h"
CURSOR_HOME = b"\x1b[H"
CLEAR_SCREEN = b"\x1b[2J"
CLEAR_LINE = b"\x1b[K"
INVERT_ON = b"\x1b[7m"
ATTR_RESET = b"\x1b[m"
DIGIT_COLOR = b"\x1b[31m"
DEFAULT_COLOR = b"\x1b[39m"
LINE_END = b"\r\n"
EMPTY_LINE_MARKER = b"~"

NO_NAME = "[No Name]"
STATUS_NAME_WIDTH = 20


def decorate(segment: bytes) -> bytes:
    """Color ASCII digits red, leaving every other byte untouched."""

    out = bytearray()
    colored = False
    for byte in segment:
        is_digit = 0x30 <= byte <= 0x39
        if is_digit and not colored:
            out += DIGIT_COLOR
            colored = True
        elif not is_digit and colored:
            out += DEFAULT_COLOR
            colored = False
        out.append(byte)
    if colored:
        out += DEFAULT_COLOR
    return bytes(out)


def cursor_to(row: int, col: int) -> bytes:
    """Escape moving the terminal cursor to 1-based ``row``/``col``."""

    return f"\x1b[{row};{col}H".encode("ascii")


class ScreenRenderer:
    def __init__(self, *, welcome: str | None = None) -> None:
        self.welcome = welcome or f"Plume editor -- version {__version__}"

    def refresh(self, session: EditorSession, sink: ByteSink) -> int:
        """Scroll, compose and flush one frame; returns bytes written."""

        session.viewport.scroll(session.buffer)
        with DrawBuffer() as frame:
            with telemetry.span("render::frame", component="render"):
                self.compose(session, frame)
            return frame.flush(sink)

    def frame_bytes(self, session: EditorSession) -> bytes:
        session.viewport.scroll(session.buffer)
        with DrawBuffer() as frame:
            self.compose(session, frame)
            return frame.getvalue()

    def clear(self, sink: ByteSink) -> None:
        sink.write_bytes(CLEAR_SCREEN + CURSOR_HOME)

    def compose(self, session: EditorSession, frame: DrawBuffer) -> None:
        view = session.viewport
        frame.append(HIDE_CURSOR)
        frame.append(CURSOR_HOME)
        self._draw_rows(session, frame)
        self._draw_status_bar(session, frame)
        self._draw_message_bar(session, frame)
        frame.append(
            cursor_to(view.cy - view.row_offset + 1, view.rx - view.col_offset + 1)
        )
        frame.append(SHOW_CURSOR)

    def _draw_rows(self, session: EditorSession, frame: DrawBuffer) -> None:
        buffer = session.buffer
        view = session.viewport
        for y in range(view.screen_rows):
            filerow = y + view.row_offset
            row = buffer.row(filerow)
            if row is None:
                if buffer.numrows == 0 and y == view.screen_rows // 3:
                    frame.append(self._welcome_line(view.screen_cols))
                else:
                    frame.append(EMPTY_LINE_MARKER)
            else:
                visible = row.render[view.col_offset : view.col_offset + view.screen_cols]
                frame.append(decorate(visible))
            frame.append(CLEAR_LINE)
            frame.append(LINE_END)

    def _welcome_line(self, cols: int) -> bytes:
        banner = self.welcome.encode("utf-8", "replace")[:cols]
        padding = (cols - len(banner)) // 2
        line = bytearray()
        if padding:
            line += EMPTY_LINE_MARKER
            padding -= 1
        line += b" " * padding
        line += banner
        return bytes(line)

    def _draw_status_bar(self, session: EditorSession, frame: DrawBuffer) -> None:
        cols = session.viewport.screen_cols
        buffer = session.buffer
        if session.filename:
            name = os.fsencode(session.filename)[:STATUS_NAME_WIDTH]
        else:
            name = NO_NAME.encode("ascii")
        modified = b" (modified)" if buffer.dirty else b""
        left = name + f" - {buffer.numrows} lines".encode("ascii") + modified
        right = f"{session.viewport.cy + 1}/{buffer.numrows}".encode("ascii")

        left = left[:cols]
        line = bytearray(left)
        while len(line) < cols:
            if cols - len(line) == len(right):
                line += right
                break
            line += b" "

        frame.append(INVERT_ON)
        frame.append(bytes(line))
        frame.append(ATTR_RESET)
        frame.append(LINE_END)

    def _draw_message_bar(self, session: EditorSession, frame: DrawBuffer) -> None:
        frame.append(CLEAR_LINE)
        message = session.visible_status_message()
        if message:
            encoded = message.encode("utf-8", "replace")
            frame.append(encoded[: session.viewport.screen_cols])


__all__ = ["ScreenRenderer", "cursor_to", "decorate"]
