from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Sequence

import pytest

from plume.buffer import TextBuffer
from plume.editor import Editor
from plume.runtime import EditorConfig
from plume.session import EditorSession


class ScriptExhausted(RuntimeError):
    """Raised when code keeps reading after a scripted source ran dry."""


class ScriptedSource:
    """Byte source replaying a script; ``None`` entries simulate timeouts."""

    def __init__(self, script: Iterable[Optional[bytes]] = (), *, grace: int = 3) -> None:
        self._queue: List[Optional[int]] = []
        self._grace = grace
        self.extend(script)

    def extend(self, script: Iterable[Optional[bytes]]) -> None:
        for chunk in script:
            if chunk is None:
                self._queue.append(None)
            else:
                self._queue.extend(chunk)

    def read_byte(self) -> Optional[int]:
        if self._queue:
            return self._queue.pop(0)
        if self._grace > 0:
            self._grace -= 1
            return None
        raise ScriptExhausted("scripted input exhausted")


class RecordingSink:
    def __init__(self) -> None:
        self.writes: List[bytes] = []

    def write_bytes(self, data: bytes) -> None:
        self.writes.append(bytes(data))

    @property
    def last(self) -> bytes:
        return self.writes[-1]


class ManualClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_session(
    lines: Sequence[bytes] = (),
    *,
    rows: int = 12,
    cols: int = 40,
    filename: Optional[str] = None,
    clock: Optional[Callable[[], float]] = None,
    config: Optional[EditorConfig] = None,
) -> EditorSession:
    cfg = config or EditorConfig()
    session = EditorSession(
        buffer=TextBuffer.from_lines(lines, tab_stop=cfg.tab_stop),
        config=cfg,
        filename=filename,
        clock=clock or ManualClock(),
    )
    session.resize(rows, cols)
    return session


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def editor_factory(sink: RecordingSink):
    def build(
        session: EditorSession,
        script: Iterable[Optional[bytes]] = (),
        **kwargs: object,
    ) -> Editor:
        return Editor(session, ScriptedSource(script), sink, **kwargs)  # type: ignore[arg-type]

    return build
