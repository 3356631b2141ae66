"""Declarative key dispatch table and its defaults."""

from .models import ActionRef, Binding
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .defaults import DEFAULT_ACTION_ID, load_default_keymaps

__all__ = [
    "ActionRef",
    "Binding",
    "DEFAULT_ACTION_ID",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "load_default_keymaps",
]
