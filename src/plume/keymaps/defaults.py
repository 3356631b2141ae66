"""Built-in keymap: the editor's dispatch table."""

from __future__ import annotations

from typing import Iterable, Sequence

from plume.actions import core as core_actions
from plume.actions import file as file_actions
from plume.actions import navigation as nav_actions
from plume.actions import search as search_actions

from .models import ActionRef, Binding
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="file.quit",
        handler=file_actions.quit_editor,
        description="Quit, confirming unsaved changes",
    ),
    ActionRef(
        id="file.save",
        handler=file_actions.save_document,
        description="Save the document",
    ),
    ActionRef(
        id="search.find",
        handler=search_actions.find,
        description="Incremental search",
    ),
    ActionRef(
        id="cursor.move",
        handler=nav_actions.move_cursor,
        description="Move the cursor one step",
    ),
    ActionRef(
        id="cursor.home",
        handler=nav_actions.move_home,
        description="Move to start of line",
    ),
    ActionRef(
        id="cursor.end",
        handler=nav_actions.move_end,
        description="Move to end of line",
    ),
    ActionRef(
        id="cursor.page_up",
        handler=nav_actions.page_up,
        description="Scroll one screen up",
    ),
    ActionRef(
        id="cursor.page_down",
        handler=nav_actions.page_down,
        description="Scroll one screen down",
    ),
    ActionRef(
        id="edit.newline",
        handler=core_actions.insert_newline,
        description="Split the line at the cursor",
    ),
    ActionRef(
        id="edit.delete_backward",
        handler=core_actions.delete_backward,
        description="Delete the character left of the cursor",
    ),
    ActionRef(
        id="edit.delete_forward",
        handler=core_actions.delete_forward,
        description="Delete the character under the cursor",
    ),
    ActionRef(
        id="edit.insert_char",
        handler=core_actions.insert_char,
        description="Insert the typed byte",
    ),
    ActionRef(
        id="core.noop",
        handler=core_actions.noop_action,
        description="Ignore the key",
    ),
)


def _bind(binding_id: str, token: str, action_id: str, description: str = "") -> Binding:
    return Binding(id=binding_id, token=token, action_id=action_id, description=description)


DEFAULT_BINDINGS: tuple[Binding, ...] = (
    _bind("quit", "ctrl+q", "file.quit", "Quit"),
    _bind("save", "ctrl+s", "file.save", "Save"),
    _bind("find", "ctrl+f", "search.find", "Find"),
    _bind("arrow_up", "up", "cursor.move"),
    _bind("arrow_down", "down", "cursor.move"),
    _bind("arrow_left", "left", "cursor.move"),
    _bind("arrow_right", "right", "cursor.move"),
    _bind("home", "home", "cursor.home"),
    _bind("end", "end", "cursor.end"),
    _bind("page_up", "page_up", "cursor.page_up"),
    _bind("page_down", "page_down", "cursor.page_down"),
    _bind("enter", "enter", "edit.newline"),
    _bind("backspace", "backspace", "edit.delete_backward"),
    _bind("ctrl_h", "ctrl+h", "edit.delete_backward"),
    _bind("delete", "delete", "edit.delete_forward"),
    _bind("refresh", "ctrl+l", "core.noop", "Redraw"),
    _bind("escape", "escape", "core.noop"),
)

# Fallback for keys with no binding of their own.
DEFAULT_ACTION_ID = "edit.insert_char"


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    exclude_bindings: Sequence[str] | None = None,
    extra_bindings: Iterable[Binding] | None = None,
) -> None:
    """Register built-in actions and bindings."""

    excluded = set(exclude_bindings or ())

    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if binding.id in excluded:
            continue
        registry.register_binding(binding, replace=replace)

    if extra_bindings:
        for binding in extra_bindings:
            registry.register_binding(binding, replace=replace)


__all__ = [
    "DEFAULT_ACTIONS",
    "DEFAULT_ACTION_ID",
    "DEFAULT_BINDINGS",
    "load_default_keymaps",
]
