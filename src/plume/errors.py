"""Exception types shared across the editor."""

from __future__ import annotations


class PlumeError(RuntimeError):
    """Base class for fatal editor errors."""


class TerminalError(PlumeError):
    """Raised when the terminal cannot be configured or measured."""


class DocumentLoadError(PlumeError):
    """Raised when a file named on the command line cannot be read."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


__all__ = ["PlumeError", "TerminalError", "DocumentLoadError"]
