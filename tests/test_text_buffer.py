from __future__ import annotations

from pathlib import Path

from plume.buffer import TextBuffer
from plume.persistence import load_lines, write_document


def test_from_lines_starts_clean() -> None:
    buffer = TextBuffer.from_lines([b"one", b"two"])

    assert buffer.numrows == 2
    assert buffer.dirty == 0


def test_insert_char_appends_and_shifts() -> None:
    buffer = TextBuffer.from_lines([b"ac"])

    assert buffer.insert_char(0, 1, ord("b")) == (0, 2)
    assert buffer.insert_char(0, 3, ord("d")) == (0, 4)
    assert buffer.lines() == [b"abcd"]
    assert buffer.dirty > 0


def test_typing_past_last_line_creates_a_row() -> None:
    buffer = TextBuffer()

    assert buffer.insert_char(0, 0, ord("x")) == (0, 1)
    assert buffer.lines() == [b"x"]


def test_split_line_moves_tail_down() -> None:
    buffer = TextBuffer.from_lines([b"hello world"])

    cursor = buffer.split_line(0, 5)

    assert cursor == (1, 0)
    assert buffer.lines() == [b"hello", b" world"]
    assert buffer.dirty > 0


def test_split_line_at_start_and_past_end() -> None:
    buffer = TextBuffer.from_lines([b"abc"])

    assert buffer.split_line(0, 0) == (1, 0)
    assert buffer.lines() == [b"", b"abc"]

    assert buffer.split_line(2, 0) == (3, 0)
    assert buffer.lines() == [b"", b"abc", b""]


def test_join_with_previous_lands_at_old_length() -> None:
    buffer = TextBuffer.from_lines([b"ab", b"cd"])

    assert buffer.join_with_previous(1) == (0, 2)
    assert buffer.lines() == [b"abcd"]
    assert buffer.join_with_previous(0) is None


def test_delete_char_at_line_start_joins() -> None:
    buffer = TextBuffer.from_lines([b"ab", b"\tcd"])

    assert buffer.delete_char(1, 0) == (0, 2)
    assert buffer.lines() == [b"ab\tcd"]
    row = buffer.row(0)
    assert row is not None
    assert row.render == b"ab" + b" " * 6 + b"cd"


def test_delete_char_at_document_start_is_noop() -> None:
    buffer = TextBuffer.from_lines([b"abc"])

    assert buffer.delete_char(0, 0) is None
    assert buffer.dirty == 0


def test_backspace_to_empty_line_counts_every_edit() -> None:
    buffer = TextBuffer.from_lines([b"abc"])
    cursor = (0, 3)
    seen = []

    for _ in range(3):
        result = buffer.delete_char(*cursor)
        assert result is not None
        cursor = result
        seen.append(buffer.dirty)

    assert buffer.lines() == [b""]
    assert cursor == (0, 0)
    assert seen == sorted(seen) and len(set(seen)) == 3


def test_out_of_range_indices_are_noops() -> None:
    buffer = TextBuffer.from_lines([b"abc"])

    assert buffer.insert_row(5, b"x") is None
    assert buffer.insert_row(-1, b"x") is None
    assert buffer.delete_row(1) is None
    assert buffer.delete_row(-1) is None
    assert buffer.insert_char(0, 9, ord("x")) is None
    assert buffer.insert_char(1, 2, ord("x")) is None
    assert buffer.insert_char(7, 0, ord("x")) is None
    assert buffer.delete_char(0, 9) is None
    assert buffer.delete_char(4, 1) is None
    assert buffer.split_line(0, 10) is None
    assert buffer.lines() == [b"abc"]
    assert buffer.dirty == 0


def test_serialized_form_terminates_every_row() -> None:
    buffer = TextBuffer.from_lines([b"a", b"", b"b"])

    assert buffer.to_serialized_form() == b"a\n\nb\n"
    assert TextBuffer().to_serialized_form() == b""


def test_edits_survive_save_and_reload(tmp_path: Path) -> None:
    buffer = TextBuffer.from_lines([b"first", b"second"])
    buffer.insert_char(0, 5, ord("!"))
    buffer.split_line(1, 3)
    buffer.delete_char(1, 1)
    buffer.join_with_previous(2)
    buffer.insert_char(2, 0, 0x09)
    expected = buffer.lines()

    target = tmp_path / "doc.txt"
    write_document(str(target), buffer.to_serialized_form())
    reloaded = TextBuffer.from_lines(load_lines(str(target)))

    assert reloaded.lines() == expected
