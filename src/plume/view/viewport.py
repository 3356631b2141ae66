"""Cursor position plus the scroll window that keeps it visible."""

from __future__ import annotations

from dataclasses import dataclass

from plume.buffer import TextBuffer

ARROW_DIRECTIONS = ("up", "down", "left", "right")


@dataclass(frozen=True, slots=True)
class ViewportSnapshot:
    cx: int
    cy: int
    col_offset: int
    row_offset: int


@dataclass(slots=True)
class Viewport:
    """Buffer-space cursor, derived render column and scroll offsets.

    ``screen_rows``/``screen_cols`` describe the text area only; the two
    bar rows are excluded by whoever sizes the viewport.
    """

    screen_rows: int = 0
    screen_cols: int = 0
    cx: int = 0
    cy: int = 0
    rx: int = 0
    row_offset: int = 0
    col_offset: int = 0

    def resize(self, screen_rows: int, screen_cols: int) -> None:
        self.screen_rows = max(1, screen_rows)
        self.screen_cols = max(1, screen_cols)

    def set_cursor(self, cy: int, cx: int) -> None:
        self.cy = cy
        self.cx = cx

    def scroll(self, buffer: TextBuffer) -> None:
        row = buffer.row(self.cy)
        self.rx = row.cx_to_rx(self.cx) if row is not None else 0

        if self.cy < self.row_offset:
            self.row_offset = self.cy
        if self.cy >= self.row_offset + self.screen_rows:
            self.row_offset = self.cy - self.screen_rows + 1

        if self.rx < self.col_offset:
            self.col_offset = self.rx
        if self.rx >= self.col_offset + self.screen_cols:
            self.col_offset = self.rx - self.screen_cols + 1

    def move(self, direction: str, buffer: TextBuffer) -> None:
        if direction not in ARROW_DIRECTIONS:
            raise ValueError(f"Unknown direction '{direction}'")
        row = buffer.row(self.cy)
        if direction == "left":
            if self.cx > 0:
                self.cx -= 1
            elif self.cy > 0:
                self.cy -= 1
                previous = buffer.row(self.cy)
                self.cx = previous.size if previous is not None else 0
        elif direction == "right":
            if row is not None and self.cx < row.size:
                self.cx += 1
            elif row is not None and self.cx == row.size:
                self.cy += 1
                self.cx = 0
        elif direction == "up":
            if self.cy > 0:
                self.cy -= 1
        else:
            if self.cy < buffer.numrows:
                self.cy += 1
        self._snap_to_row(buffer)

    def home(self) -> None:
        self.cx = 0

    def end(self, buffer: TextBuffer) -> None:
        row = buffer.row(self.cy)
        if row is not None:
            self.cx = row.size

    def page(self, direction: str, buffer: TextBuffer) -> None:
        if direction == "up":
            self.cy = self.row_offset
        else:
            self.cy = min(self.row_offset + self.screen_rows - 1, buffer.numrows)
            raise ValueError(f"Unknown page direction '{direction}'")
        for _ in range(self.screen_rows):
            self.move(direction, buffer)

    def snapshot(self) -> ViewportSnapshot:
        return ViewportSnapshot(
            cx=self.cx,
            cy=self.cy,
            col_offset=self.col_offset,
            row_offset=self.row_offset,
        )

    def restore(self, saved: ViewportSnapshot) -> None:
        self.cx = saved.cx
        self.cy = saved.cy
        self.col_offset = saved.col_offset
        self.row_offset = saved.row_offset

    def _snap_to_row(self, buffer: TextBuffer) -> None:
        row = buffer.row(self.cy)
        limit = row.size if row is not None else 0
        if self.cx > limit:
            self.cx = limit
