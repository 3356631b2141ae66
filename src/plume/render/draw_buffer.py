"""Append-only frame buffer flushed to the terminal in a single write."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Protocol


class ByteSink(Protocol):
    def write_bytes(self, data: bytes) -> None:
        """Write all of ``data`` or raise."""
        ...


class DrawBuffer(AbstractContextManager["DrawBuffer"]):
    """Collects one frame; once flushed or released it refuses further use."""

    def __init__(self) -> None:
        self._data = bytearray()
        self._closed = False

    def __len__(self) -> int:
        return len(self._data)

    def append(self, chunk: bytes) -> None:
        self._check_open()
        self._data.extend(chunk)

    def getvalue(self) -> bytes:
        self._check_open()
        return bytes(self._data)

    def flush(self, sink: ByteSink) -> int:
        self._check_open()
        payload = bytes(self._data)
        sink.write_bytes(payload)
        self._release()
        return len(payload)

    def __exit__(self, exc_type, exc, tb) -> bool:
        self._release()
        return False

    def _release(self) -> None:
        self._closed = True
        self._data = bytearray()

    def _check_open(self) -> None:
        if self._closed:
            raise RuntimeError("DrawBuffer used after flush")


__all__ = ["ByteSink", "DrawBuffer"]
