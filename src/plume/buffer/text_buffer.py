"""Ordered collection of rows with line- and character-level edits."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Tuple

from .coords import DEFAULT_TAB_STOP
from .row import Row

Cursor = Tuple[int, int]  # (cy, cx)

NEWLINE = b"\n"


class TextBuffer:
    """Owns every Row of the document and the unsaved-change counter.

    Edit methods take buffer coordinates and return the cursor the caller
    should adopt afterwards, or ``None`` when the request was out of range
    and nothing changed.
    """

    def __init__(self, *, tab_stop: int = DEFAULT_TAB_STOP) -> None:
        self.tab_stop = tab_stop
        self._rows: List[Row] = []
        self.dirty = 0

    @classmethod
    def from_lines(
        cls, lines: Iterable[bytes], *, tab_stop: int = DEFAULT_TAB_STOP
    ) -> "TextBuffer":
        buffer = cls(tab_stop=tab_stop)
        for line in lines:
            buffer.insert_row(buffer.numrows, line)
        buffer.dirty = 0
        return buffer

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self._rows)

    @property
    def numrows(self) -> int:
        return len(self._rows)

    def row(self, index: int) -> Optional[Row]:
        if 0 <= index < len(self._rows):
            return self._rows[index]
        return None

    def lines(self) -> List[bytes]:
        return [row.characters for row in self._rows]

    def mark_clean(self) -> None:
        self.dirty = 0

    def insert_row(self, at: int, content: bytes = b"") -> Optional[Cursor]:
        if at < 0 or at > len(self._rows):
            return None
        self._rows.insert(at, Row(content, tab_stop=self.tab_stop))
        self.dirty += 1
        return (at, 0)

    def delete_row(self, at: int) -> Optional[Cursor]:
        if at < 0 or at >= len(self._rows):
            return None
        del self._rows[at]
        self.dirty += 1
        return (at, 0)

    def insert_char(self, cy: int, cx: int, ch: int) -> Optional[Cursor]:
        if cy == len(self._rows):
            if cx != 0:
                return None
            self.insert_row(cy, b"")
        row = self.row(cy)
        if row is None or not row.insert(cx, ch):
            return None
        self.dirty += 1
        return (cy, cx + 1)

    def delete_char(self, cy: int, cx: int) -> Optional[Cursor]:
        row = self.row(cy)
        if row is None or (cx == 0 and cy == 0):
            return None
        if cx == 0:
            return self.join_with_previous(cy)
        if not row.delete(cx - 1):
            return None
        self.dirty += 1
        return (cy, cx - 1)

    def split_line(self, cy: int, cx: int) -> Optional[Cursor]:
        if cy == len(self._rows):
            if cx != 0:
                return None
            self.insert_row(cy, b"")
            return (cy + 1, 0)
        row = self.row(cy)
        if row is None or cx < 0 or cx > row.size:
            return None
        tail = row.truncate(cx)
        self.insert_row(cy + 1, tail)
        return (cy + 1, 0)

    def join_with_previous(self, cy: int) -> Optional[Cursor]:
        row = self.row(cy)
        if row is None or cy == 0:
            return None
        previous = self._rows[cy - 1]
        landing = previous.size
        previous.append(row.characters)
        self.delete_row(cy)
        return (cy - 1, landing)

    def to_serialized_form(self) -> bytes:
        return b"".join(row.characters + NEWLINE for row in self._rows)


__all__ = ["TextBuffer", "Cursor"]
