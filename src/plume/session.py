"""Editor session: the single document plus everything drawn around it."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from plume.buffer import TextBuffer
from plume.persistence import load_lines, write_document
from plume.runtime import EditorConfig
from plume.view import Viewport

# Rows taken by the status bar and the message bar.
RESERVED_ROWS = 2


@dataclass
class EditorSession:
    """Aggregate passed to every component; there is no global editor state."""

    buffer: TextBuffer
    viewport: Viewport = field(default_factory=Viewport)
    config: EditorConfig = field(default_factory=EditorConfig)
    filename: Optional[str] = None
    status_message: str = ""
    status_time: float = 0.0
    clock: Callable[[], float] = time.time

    @classmethod
    def new(
        cls,
        *,
        config: Optional[EditorConfig] = None,
        clock: Callable[[], float] = time.time,
    ) -> "EditorSession":
        cfg = config or EditorConfig()
        return cls(buffer=TextBuffer(tab_stop=cfg.tab_stop), config=cfg, clock=clock)

    @classmethod
    def open(
        cls,
        path: str,
        *,
        config: Optional[EditorConfig] = None,
        clock: Callable[[], float] = time.time,
        loader: Callable[[str], list[bytes]] = load_lines,
    ) -> "EditorSession":
        """Load ``path``; a missing or unreadable file raises ``DocumentLoadError``."""

        cfg = config or EditorConfig()
        buffer = TextBuffer.from_lines(loader(path), tab_stop=cfg.tab_stop)
        return cls(buffer=buffer, config=cfg, filename=path, clock=clock)

    def resize(self, terminal_rows: int, terminal_cols: int) -> None:
        self.viewport.resize(terminal_rows - RESERVED_ROWS, terminal_cols)

    def set_status_message(self, message: str) -> None:
        self.status_message = message
        self.status_time = self.clock()

    def visible_status_message(self) -> str:
        if not self.status_message:
            return ""
        if self.clock() - self.status_time >= self.config.message_timeout:
            return ""
        return self.status_message

    def save(self, writer: Callable[[str, bytes], int] = write_document) -> int:
        """Write the buffer to ``filename``; ``dirty`` resets only on success."""

        if not self.filename:
            raise ValueError("session has no filename")
        data = self.buffer.to_serialized_form()
        written = writer(self.filename, data)
        self.buffer.mark_clean()
        return written


__all__ = ["EditorSession", "RESERVED_ROWS"]
