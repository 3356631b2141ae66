from __future__ import annotations

import pytest

from conftest import ScriptedSource
from plume.keys import InputDecoder, Key
from plume.keys.models import (
    ARROW_DOWN,
    ARROW_LEFT,
    ARROW_RIGHT,
    ARROW_UP,
    DELETE,
    END,
    ESCAPE,
    HOME,
    PAGE_DOWN,
    PAGE_UP,
)


def decode_all(*chunks: bytes | None) -> list[Key]:
    decoder = InputDecoder(ScriptedSource(chunks, grace=2))
    keys = []
    while True:
        try:
            key = decoder.poll_key()
        except RuntimeError:
            return keys
        if key is not None:
            keys.append(key)


def test_plain_bytes_become_char_keys() -> None:
    keys = decode_all(b"a\x11\r")

    assert keys == [Key.char("a"), Key.char(0x11), Key.char(0x0D)]
    assert [key.token for key in keys] == ["a", "ctrl+q", "enter"]


@pytest.mark.parametrize(
    ("sequence", "kind"),
    [
        (b"\x1b[A", ARROW_UP),
        (b"\x1b[B", ARROW_DOWN),
        (b"\x1b[C", ARROW_RIGHT),
        (b"\x1b[D", ARROW_LEFT),
        (b"\x1b[H", HOME),
        (b"\x1b[F", END),
        (b"\x1bOH", HOME),
        (b"\x1bOF", END),
        (b"\x1b[1~", HOME),
        (b"\x1b[7~", HOME),
        (b"\x1b[3~", DELETE),
        (b"\x1b[4~", END),
        (b"\x1b[8~", END),
        (b"\x1b[5~", PAGE_UP),
        (b"\x1b[6~", PAGE_DOWN),
    ],
)
def test_escape_sequences(sequence: bytes, kind: str) -> None:
    assert decode_all(sequence) == [Key(kind)]


def test_lone_escape_when_input_stalls() -> None:
    assert decode_all(b"\x1b", None, b"x") == [Key(ESCAPE), Key.char("x")]


def test_unknown_tail_is_swallowed_as_escape() -> None:
    assert decode_all(b"\x1bxyz") == [Key(ESCAPE), Key.char("z")]
    assert decode_all(b"\x1b[9~q") == [Key(ESCAPE), Key.char("q")]
    assert decode_all(b"\x1b[5xq") == [Key(ESCAPE), Key.char("q")]
    assert decode_all(b"\x1bOAq") == [Key(ESCAPE), Key.char("q")]


def test_digit_sequence_missing_terminator() -> None:
    assert decode_all(b"\x1b[5", None, b"q") == [Key(ESCAPE), Key.char("q")]


def test_poll_reports_timeouts_and_next_key_retries() -> None:
    decoder = InputDecoder(ScriptedSource([None, None, b"k"]))

    assert decoder.poll_key() is None
    assert decoder.next_key() == Key.char("k")


def test_high_bytes_pass_through() -> None:
    keys = decode_all("é".encode("utf-8"))

    assert [key.byte for key in keys] == [0xC3, 0xA9]
    assert all(key.is_insertable for key in keys)
