"""Modal single-line input shown in the message bar."""

from __future__ import annotations

from typing import Callable, Optional

from plume.keys import InputDecoder, Key
from plume.keys.models import ESCAPE
from plume.runtime import telemetry
from plume.session import EditorSession


class PromptCallback:
    """Hook run with the current input after each prompt keystroke."""

    def on_key(self, query: bytes, key: Key) -> None:  # pragma: no cover - abstract
        raise NotImplementedError


class NoCallback(PromptCallback):
    """Prompt without live feedback (e.g. save-as)."""

    def on_key(self, query: bytes, key: Key) -> None:
        del query, key


NO_CALLBACK = NoCallback()


class PromptController:
    """Runs a blocking read-a-line loop on top of the editor's frame loop.

    ``template`` must contain one ``{}`` placeholder for the text typed so
    far. ``prompt`` returns the collected bytes, or ``None`` when the user
    cancelled with Escape. Enter on empty input is ignored.
    """

    def __init__(
        self,
        session: EditorSession,
        decoder: InputDecoder,
        refresh: Callable[[], None],
    ) -> None:
        self.session = session
        self.decoder = decoder
        self.refresh = refresh

    def prompt(
        self, template: str, callback: PromptCallback = NO_CALLBACK
    ) -> Optional[bytes]:
        typed = bytearray()
        with telemetry.span(
            "prompt::read_line",
            component="prompt",
            metadata={"callback": type(callback).__name__},
        ) as handle:
            while True:
                self.session.set_status_message(
                    template.format(typed.decode("utf-8", "replace"))
                )
                self.refresh()
                key = self.decoder.poll_key()
                if key is None:
                    continue

                if key.is_backspace:
                    if typed:
                        del typed[-1]
                elif key.kind == ESCAPE:
                    self.session.set_status_message("")
                    callback.on_key(bytes(typed), key)
                    handle.add_metadata("outcome", "cancelled")
                    return None
                elif key.is_enter:
                    if typed:
                        self.session.set_status_message("")
                        callback.on_key(bytes(typed), key)
                        handle.add_metadata("outcome", "submitted")
                        return bytes(typed)
                elif key.is_printable:
                    assert key.byte is not None
                    typed.append(key.byte)

                callback.on_key(bytes(typed), key)


__all__ = ["NO_CALLBACK", "NoCallback", "PromptCallback", "PromptController"]
