"""Editing verbs bound to keys by the default keymap."""

from .base import ActionResult, EditorContext
from .core import (
    delete_backward,
    delete_forward,
    insert_char,
    insert_newline,
    noop_action,
)
from .file import quit_editor, save_document
from .navigation import move_cursor, move_end, move_home, page_down, page_up
from .search import find

__all__ = [
    "ActionResult",
    "EditorContext",
    "delete_backward",
    "delete_forward",
    "find",
    "insert_char",
    "insert_newline",
    "move_cursor",
    "move_end",
    "move_home",
    "noop_action",
    "page_down",
    "page_up",
    "quit_editor",
    "save_document",
]
