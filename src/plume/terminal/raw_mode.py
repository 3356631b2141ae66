"""Raw byte mode for the controlling terminal."""

from __future__ import annotations

import termios
from contextlib import AbstractContextManager
from typing import Any, List, Optional

from plume.errors import TerminalError
from plume.runtime import telemetry


class RawMode(AbstractContextManager["RawMode"]):
    """Disable echo, line buffering, signals and translation while active.

    Reads return after at most a tenth of a second (``VMIN=0``,
    ``VTIME=1``). The original attributes are restored on every exit path.
    """

    def __init__(self, fd: int) -> None:
        self.fd = fd
        self._original: Optional[List[Any]] = None

    def enable(self) -> None:
        try:
            self._original = termios.tcgetattr(self.fd)
            raw = termios.tcgetattr(self.fd)
            raw[0] &= ~(
                termios.BRKINT | termios.ICRNL | termios.INPCK | termios.ISTRIP | termios.IXON
            )
            raw[1] &= ~termios.OPOST
            raw[2] |= termios.CS8
            raw[3] &= ~(termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG)
            raw[6][termios.VMIN] = 0
            raw[6][termios.VTIME] = 1
            termios.tcsetattr(self.fd, termios.TCSAFLUSH, raw)
        except termios.error as exc:
            self._original = None
            raise TerminalError(f"cannot enable raw mode: {exc}") from exc
        telemetry.record_event("terminal.raw_mode", level="debug", data={"fd": self.fd})

    def restore(self) -> None:
        if self._original is None:
            return
        try:
            termios.tcsetattr(self.fd, termios.TCSAFLUSH, self._original)
        except termios.error as exc:
            raise TerminalError(f"cannot restore terminal mode: {exc}") from exc
        finally:
            self._original = None

    def __enter__(self) -> "RawMode":
        self.enable()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.restore()
        return False


__all__ = ["RawMode"]
