from __future__ import annotations

from typing import List, Optional, Tuple

from conftest import ScriptedSource, make_session
from plume.keys import InputDecoder, Key, ctrl
from plume.keys.models import ARROW_DOWN, ARROW_UP, ESCAPE
from plume.prompt import PromptCallback, PromptController
from plume.search import SEARCH_PROMPT, SearchEngine


class RecordingCallback(PromptCallback):
    def __init__(self) -> None:
        self.calls: List[Tuple[bytes, Key]] = []

    def on_key(self, query: bytes, key: Key) -> None:
        self.calls.append((query, key))


def make_prompt(session, *script: Optional[bytes]) -> Tuple[PromptController, List[str]]:
    frames: List[str] = []
    decoder = InputDecoder(ScriptedSource(script))
    controller = PromptController(
        session, decoder, lambda: frames.append(session.status_message)
    )
    return controller, frames


def test_prompt_collects_until_enter() -> None:
    session = make_session()
    controller, frames = make_prompt(session, b"ab\x7fc\r")

    answer = controller.prompt("Name: {}")

    assert answer == b"ac"
    assert frames[-1] == "Name: ac"
    assert session.status_message == ""


def test_prompt_ignores_enter_on_empty_input() -> None:
    session = make_session()
    controller, _ = make_prompt(session, b"\r\rx\r")

    assert controller.prompt("Name: {}") == b"x"


def test_prompt_escape_cancels() -> None:
    session = make_session()
    controller, _ = make_prompt(session, b"ab\x1b", None)

    assert controller.prompt("Name: {}") is None
    assert session.status_message == ""


def test_prompt_skips_control_bytes_and_timeouts() -> None:
    session = make_session()
    controller, _ = make_prompt(session, b"a", None, bytes([ctrl("b")]), b"\tz\r")

    assert controller.prompt("Name: {}") == b"az"


def test_callback_sees_every_key_and_terminator() -> None:
    session = make_session()
    callback = RecordingCallback()
    controller, _ = make_prompt(session, b"ab\r")

    controller.prompt("Find: {}", callback)

    assert [query for query, _ in callback.calls] == [b"a", b"ab", b"ab"]
    assert callback.calls[-1][1].is_enter


def test_callback_notified_on_cancel() -> None:
    session = make_session()
    callback = RecordingCallback()
    controller, _ = make_prompt(session, b"q\x1b", None)

    controller.prompt("Find: {}", callback)

    assert callback.calls[-1][1].kind == ESCAPE


def test_search_wraps_in_both_directions() -> None:
    session = make_session([b"foo", b"bar", b"foobar"])
    engine = SearchEngine(session)

    assert engine.step(b"foo", Key.char("o")) == 0
    assert engine.step(b"foo", Key(ARROW_DOWN)) == 2
    assert engine.step(b"foo", Key(ARROW_DOWN)) == 0
    assert engine.step(b"foo", Key(ARROW_UP)) == 2
    assert engine.step(b"foo", Key(ARROW_UP)) == 0


def test_typing_restarts_search_from_top() -> None:
    session = make_session([b"foo", b"bar", b"foobar"])
    engine = SearchEngine(session)

    engine.step(b"foo", Key.char("o"))
    engine.step(b"foo", Key(ARROW_DOWN))

    assert engine.step(b"foob", Key.char("b")) == 2
    assert engine.state.last_match == 2


def test_arrow_up_before_any_match_searches_forward() -> None:
    session = make_session([b"x", b"needle", b"needle"])
    engine = SearchEngine(session)

    assert engine.step(b"needle", Key(ARROW_UP)) == 1


def test_miss_leaves_cursor() -> None:
    session = make_session([b"abc"])
    session.viewport.set_cursor(0, 2)
    engine = SearchEngine(session)

    assert engine.step(b"zzz", Key.char("z")) is None
    assert (session.viewport.cy, session.viewport.cx) == (0, 2)


def test_empty_query_matches_every_row() -> None:
    session = make_session([b"abc", b"def"])
    session.viewport.set_cursor(1, 2)
    engine = SearchEngine(session)

    assert engine.step(b"", Key.char(0x7F)) == 0
    assert (session.viewport.cy, session.viewport.cx) == (0, 0)
    assert engine.step(b"", Key(ARROW_DOWN)) == 1


def test_match_maps_render_column_back_to_buffer() -> None:
    session = make_session([b"plain", b"\tfoo"])
    engine = SearchEngine(session)

    assert engine.step(b"foo", Key.char("o")) == 1

    view = session.viewport
    assert (view.cy, view.cx) == (1, 1)
    assert view.row_offset == 2


def test_enter_resets_search_state() -> None:
    session = make_session([b"foo"])
    engine = SearchEngine(session)

    engine.step(b"foo", Key.char("o"))
    engine.step(b"foo", Key.char(0x0D))

    assert engine.state.last_match == -1
    assert engine.state.direction == 1


def test_interactive_find_keeps_cursor_on_submit(editor_factory, sink) -> None:
    session = make_session([b"foo", b"bar", b"foobar"])
    editor = editor_factory(session, [b"\x06bar\r"])

    result = editor.handle_key(editor.decoder.next_key())

    assert result.status == "search_done"
    assert result.message == "bar"
    assert (session.viewport.cy, session.viewport.cx) == (1, 0)
    assert any(SEARCH_PROMPT.format("ba").encode() in frame for frame in sink.writes)


def test_interactive_find_cancel_restores_view(editor_factory) -> None:
    lines = [b"line %d" % index for index in range(30)]
    lines[25] = b"target"
    session = make_session(lines)
    session.viewport.set_cursor(3, 2)
    editor = editor_factory(session, [b"\x06targ\x1b", None])

    result = editor.handle_key(editor.decoder.next_key())

    view = session.viewport
    assert result.status == "search_cancelled"
    assert (view.cy, view.cx, view.row_offset, view.col_offset) == (3, 2, 0, 0)
    assert editor.search.state.last_match == -1
