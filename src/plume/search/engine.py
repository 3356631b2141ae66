"""Incremental, directional, wrap-around search over rendered rows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from plume.keys import Key
from plume.keys.models import ARROW_DOWN, ARROW_LEFT, ARROW_RIGHT, ARROW_UP, ESCAPE
from plume.prompt import PromptCallback, PromptController
from plume.runtime import telemetry
from plume.session import EditorSession

SEARCH_PROMPT = "Search: {} (Use ESC/Arrows/Enter)"

FORWARD_KEYS = frozenset({ARROW_RIGHT, ARROW_DOWN})
BACKWARD_KEYS = frozenset({ARROW_LEFT, ARROW_UP})


@dataclass(slots=True)
class SearchState:
    """Per-invocation search position; ``last_match == -1`` means none yet."""

    last_match: int = -1
    direction: int = 1

    def reset(self) -> None:
        self.last_match = -1
        self.direction = 1


class SearchCallback(PromptCallback):
    """Prompt hook that advances the search after every keystroke."""

    def __init__(self, engine: "SearchEngine") -> None:
        self.engine = engine

    def on_key(self, query: bytes, key: Key) -> None:
        self.engine.step(query, key)


class SearchEngine:
    def __init__(
        self, session: EditorSession, prompt: Optional[PromptController] = None
    ) -> None:
        self.session = session
        self.prompt = prompt
        self.state = SearchState()

    def find(self) -> Optional[bytes]:
        """Run an interactive search; cancelling restores the cursor and scroll."""

        if self.prompt is None:
            raise RuntimeError("SearchEngine.find requires a PromptController")
        view = self.session.viewport
        saved = view.snapshot()
        self.state.reset()
        try:
            query = self.prompt.prompt(SEARCH_PROMPT, SearchCallback(self))
        finally:
            self.state.reset()
        if query is None:
            view.restore(saved)
        return query

    def step(self, query: bytes, key: Key) -> Optional[int]:
        """Apply one keystroke; returns the matched row index, if any."""

        state = self.state
        if key.is_enter or key.kind == ESCAPE:
            state.reset()
            return None
        if key.kind in FORWARD_KEYS:
            state.direction = 1
        elif key.kind in BACKWARD_KEYS:
            state.direction = -1
        else:
            state.reset()

        if state.last_match == -1:
            state.direction = 1

        buffer = self.session.buffer
        numrows = buffer.numrows
        current = state.last_match
        for _ in range(numrows):
            current += state.direction
            if current == -1:
                current = numrows - 1
            elif current == numrows:
                current = 0

            row = buffer.row(current)
            assert row is not None
            position = row.render.find(query)
            if position == -1:
                continue

            state.last_match = current
            view = self.session.viewport
            view.cy = current
            view.cx = row.rx_to_cx(position)
            # Pushes the next scroll() to place the match on the top line.
            view.row_offset = numrows
            telemetry.record_event(
                "search.match",
                level="debug",
                data={"row": current, "direction": state.direction},
            )
            return current
        return None


__all__ = ["SEARCH_PROMPT", "SearchCallback", "SearchEngine", "SearchState"]
