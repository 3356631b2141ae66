"""File-descriptor backed byte source and sink."""

from __future__ import annotations

import errno
import os
import select
from typing import Optional


class FdByteSource:
    """Reads single bytes, waiting at most ``timeout`` seconds for each."""

    def __init__(self, fd: int, *, timeout: float = 0.1) -> None:
        self.fd = fd
        self.timeout = timeout

    def read_byte(self) -> Optional[int]:
        try:
            ready, _, _ = select.select([self.fd], [], [], self.timeout)
        except InterruptedError:
            return None
        if not ready:
            return None
        try:
            chunk = os.read(self.fd, 1)
        except BlockingIOError:
            return None
        except OSError as exc:
            if exc.errno == errno.EAGAIN:
                return None
            raise
        if not chunk:
            return None
        return chunk[0]


class FdByteSink:
    """Writes whole frames; partial writes are retried until done."""

    def __init__(self, fd: int) -> None:
        self.fd = fd

    def write_bytes(self, data: bytes) -> None:
        view = memoryview(data)
        while view:
            written = os.write(self.fd, view)
            view = view[written:]


__all__ = ["FdByteSink", "FdByteSource"]
