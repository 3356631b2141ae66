"""Terminal size lookup."""

from __future__ import annotations

import os
from typing import Tuple

from plume.errors import TerminalError


def query_window_size(fd: int) -> Tuple[int, int]:
    """Return ``(rows, cols)``; a terminal that reports nothing is an error."""

    try:
        size = os.get_terminal_size(fd)
    except OSError as exc:
        raise TerminalError(f"cannot query window size: {exc}") from exc
    if size.lines <= 0 or size.columns <= 0:
        raise TerminalError("terminal reported an empty window size")
    return size.lines, size.columns


__all__ = ["query_window_size"]
