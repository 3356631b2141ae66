"""Context and result types shared by every editor action."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Optional

from plume.persistence import write_document
from plume.session import EditorSession

if TYPE_CHECKING:  # pragma: no cover - typing only
    from plume.prompt import PromptController
    from plume.search import SearchEngine


@dataclass(slots=True)
class ActionResult:
    """Outcome returned from an action handler."""

    status: str = "ok"
    message: Optional[str] = None
    quit: bool = False


@dataclass(slots=True)
class EditorContext:
    """Services every action can reach."""

    session: EditorSession
    prompt: "PromptController"
    search: "SearchEngine"
    quit_remaining: int = 3
    writer: Callable[[str, bytes], int] = field(default=write_document)


__all__ = ["ActionResult", "EditorContext"]
