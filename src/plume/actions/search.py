"""Incremental search entry point."""

from __future__ import annotations

from plume.keys import Key

from .base import ActionResult, EditorContext


def find(context: EditorContext, key: Key) -> ActionResult:
    del key
    query = context.search.find()
    if query is None:
        return ActionResult(status="search_cancelled")
    return ActionResult(status="search_done", message=query.decode("utf-8", "replace"))


__all__ = ["find"]
