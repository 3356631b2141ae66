"""File loading and saving for a single document."""

from __future__ import annotations

import os
from typing import List

from plume.errors import DocumentLoadError
from plume.runtime import telemetry

FILE_MODE = 0o644


def load_lines(path: str) -> List[bytes]:
    """Read ``path`` as byte lines with LF or CRLF endings stripped."""

    try:
        with open(path, "rb") as handle:
            raw = handle.read()
    except OSError as exc:
        telemetry.record_event(
            "file.load_failed", level="error", data={"path": path, "error": exc}
        )
        reason = exc.strerror or str(exc)
        raise DocumentLoadError(f"cannot open {path}: {reason}", path=path) from exc

    lines: List[bytes] = []
    for line in raw.split(b"\n"):
        while line.endswith(b"\r"):
            line = line[:-1]
        lines.append(line)
    # A trailing newline terminates the last line rather than starting a new one.
    if lines and lines[-1] == b"" and raw.endswith(b"\n"):
        lines.pop()
    if raw == b"":
        lines = []
    telemetry.record_event("file.load", data={"path": path, "lines": len(lines)})
    return lines


def write_document(path: str, data: bytes) -> int:
    """Create or truncate ``path`` and write ``data``; returns bytes written.

    ``OSError`` propagates so the caller can report it and keep the
    document dirty.
    """

    fd = os.open(path, os.O_RDWR | os.O_CREAT, FILE_MODE)
    try:
        os.ftruncate(fd, len(data))
        view = memoryview(data)
        written = 0
        while written < len(data):
            written += os.write(fd, view[written:])
    finally:
        os.close(fd)
    return written


__all__ = ["load_lines", "write_document"]
