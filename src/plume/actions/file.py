"""Save and quit actions."""

from __future__ import annotations

import os

from plume.keys import Key
from plume.runtime import telemetry

from .base import ActionResult, EditorContext

SAVE_AS_PROMPT = "Save as: {} (ESC to cancel)"


def save_document(context: EditorContext, key: Key) -> ActionResult:
    del key
    session = context.session
    if not session.filename:
        answer = context.prompt.prompt(SAVE_AS_PROMPT)
        if answer is None:
            session.set_status_message("Save aborted")
            return ActionResult(status="save_aborted")
        session.filename = os.fsdecode(answer)

    try:
        written = session.save(context.writer)
    except OSError as exc:
        reason = exc.strerror or str(exc)
        telemetry.record_event(
            "file.save_failed",
            level="error",
            data={"path": session.filename, "error": reason},
        )
        session.set_status_message(f"Can't save! I/O error: {reason}")
        return ActionResult(status="save_failed", message=reason)

    telemetry.record_event(
        "file.save", data={"path": session.filename, "bytes": written}
    )
    session.set_status_message(f"{written} bytes written to disk")
    return ActionResult(status="saved")


def quit_editor(context: EditorContext, key: Key) -> ActionResult:
    """Quit, unless unsaved changes still need more confirmations."""

    del key
    session = context.session
    if session.buffer.dirty and context.quit_remaining > 0:
        session.set_status_message(
            "WARNING!!! File has unsaved changes. "
            f"Press Ctrl-Q {context.quit_remaining} more times to quit."
        )
        context.quit_remaining -= 1
        return ActionResult(status="quit_blocked")
    return ActionResult(status="quit", quit=True)


__all__ = ["quit_editor", "save_document", "SAVE_AS_PROMPT"]
