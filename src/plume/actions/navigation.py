"""Cursor movement actions."""

from __future__ import annotations

from plume.keys import Key

from .base import ActionResult, EditorContext


def move_cursor(context: EditorContext, key: Key) -> ActionResult:
    """Arrow keys; the key kind doubles as the direction name."""

    session = context.session
    session.viewport.move(key.kind, session.buffer)
    return ActionResult(status="move")


def move_home(context: EditorContext, key: Key) -> ActionResult:
    del key
    context.session.viewport.home()
    return ActionResult(status="move")


def move_end(context: EditorContext, key: Key) -> ActionResult:
    del key
    session = context.session
    session.viewport.end(session.buffer)
    return ActionResult(status="move")


def page_up(context: EditorContext, key: Key) -> ActionResult:
    del key
    session = context.session
    session.viewport.page("up", session.buffer)
    return ActionResult(status="page")


def page_down(context: EditorContext, key: Key) -> ActionResult:
    del key
    session = context.session
    session.viewport.page("down", session.buffer)
    return ActionResult(status="page")


__all__ = ["move_cursor", "move_end", "move_home", "page_down", "page_up"]
