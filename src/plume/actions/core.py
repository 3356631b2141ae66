"""Text-editing actions: typing, newlines and deletion."""

from __future__ import annotations

from plume.keys import Key

from .base import ActionResult, EditorContext


def insert_char(context: EditorContext, key: Key) -> ActionResult:
    if not key.is_insertable:
        return ActionResult(status="ignored")
    assert key.byte is not None
    session = context.session
    view = session.viewport
    cursor = session.buffer.insert_char(view.cy, view.cx, key.byte)
    if cursor is None:
        return ActionResult(status="out_of_range")
    view.set_cursor(*cursor)
    return ActionResult(status="insert")


def insert_newline(context: EditorContext, key: Key) -> ActionResult:
    del key
    session = context.session
    view = session.viewport
    cursor = session.buffer.split_line(view.cy, view.cx)
    if cursor is None:
        return ActionResult(status="out_of_range")
    view.set_cursor(*cursor)
    return ActionResult(status="newline")


def delete_backward(context: EditorContext, key: Key) -> ActionResult:
    del key
    session = context.session
    view = session.viewport
    cursor = session.buffer.delete_char(view.cy, view.cx)
    if cursor is None:
        return ActionResult(status="noop")
    view.set_cursor(*cursor)
    return ActionResult(status="delete")


def delete_forward(context: EditorContext, key: Key) -> ActionResult:
    context.session.viewport.move("right", context.session.buffer)
    return delete_backward(context, key)


def noop_action(context: EditorContext, key: Key) -> ActionResult:
    del context, key
    return ActionResult(status="noop")


__all__ = [
    "delete_backward",
    "delete_forward",
    "insert_char",
    "insert_newline",
    "noop_action",
]
