"""Runtime services: configuration and telemetry."""

from .config import EditorConfig

__all__ = ["EditorConfig"]
