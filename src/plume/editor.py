"""Frame loop tying the decoder, keymap, actions and renderer together."""

from __future__ import annotations

from typing import Callable, Optional, Tuple

from plume.actions import ActionResult, EditorContext
from plume.keymaps import DEFAULT_ACTION_ID, KeymapRegistry, load_default_keymaps
from plume.keys import ByteSource, InputDecoder, Key
from plume.persistence import write_document
from plume.prompt import PromptController
from plume.render import ByteSink, ScreenRenderer
from plume.runtime import telemetry
from plume.search import SearchEngine
from plume.session import EditorSession

HELP_MESSAGE = "HELP: Ctrl-S = save | Ctrl-Q = quit | Ctrl-F = find"


class Editor:
    """Owns the render -> read -> dispatch loop for one session."""

    def __init__(
        self,
        session: EditorSession,
        source: ByteSource,
        sink: ByteSink,
        *,
        keymap_registry: KeymapRegistry | None = None,
        load_defaults: bool = True,
        renderer: ScreenRenderer | None = None,
        writer: Callable[[str, bytes], int] = write_document,
        geometry: Optional[Callable[[], Tuple[int, int]]] = None,
    ) -> None:
        self.session = session
        self.sink = sink
        self.decoder = InputDecoder(source)
        self.renderer = renderer or ScreenRenderer()
        self.keymap_registry = keymap_registry or KeymapRegistry(
            logger_name="plume.keymaps"
        )
        if load_defaults and keymap_registry is None:
            load_default_keymaps(self.keymap_registry)
        self.prompt = PromptController(session, self.decoder, self.refresh_screen)
        self.search = SearchEngine(session, self.prompt)
        self.context = EditorContext(
            session=session,
            prompt=self.prompt,
            search=self.search,
            quit_remaining=session.config.quit_times,
            writer=writer,
        )
        self._geometry = geometry
        self._resize_pending = False

    def request_resize(self) -> None:
        """Ask for a geometry re-query before the next frame (signal safe)."""

        self._resize_pending = True

    def refresh_screen(self) -> None:
        if self._resize_pending and self._geometry is not None:
            self._resize_pending = False
            rows, cols = self._geometry()
            self.session.resize(rows, cols)
            telemetry.record_event(
                "terminal.resize", level="debug", data={"rows": rows, "cols": cols}
            )
        self.renderer.refresh(self.session, self.sink)

    def handle_key(self, key: Key) -> ActionResult:
        registry = self.keymap_registry
        action = registry.lookup(key.token) or registry.get_action(DEFAULT_ACTION_ID)
        with telemetry.span(
            "editor::dispatch",
            component=True,
            metadata={"key": key.token, "action": action.telemetry_name},
        ):
            outcome = action(self.context, key)

        result = outcome if isinstance(outcome, ActionResult) else ActionResult()
        if not result.quit and result.status != "quit_blocked":
            self.context.quit_remaining = self.session.config.quit_times
        return result

    def run(self, *, status_message: str = HELP_MESSAGE) -> None:
        """Loop until a quit action succeeds, then clear the screen."""

        if status_message:
            self.session.set_status_message(status_message)
        telemetry.record_event(
            "editor.start",
            data={
                "file": self.session.filename or "",
                "rows": self.session.buffer.numrows,
            },
        )
        while True:
            self.refresh_screen()
            key = self.decoder.poll_key()
            if key is None:
                continue
            result = self.handle_key(key)
            if result.quit:
                break
        self.renderer.clear(self.sink)
        telemetry.record_event("editor.quit", data={"dirty": self.session.buffer.dirty})


__all__ = ["Editor", "HELP_MESSAGE"]
