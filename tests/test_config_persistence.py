import pytest

from plume.errors import DocumentLoadError
from plume.persistence import load_lines, write_document
from plume.runtime import EditorConfig
from plume.session import EditorSession


def test_config_defaults() -> None:
    config = EditorConfig.from_env({})

    assert config == EditorConfig()
    assert (config.tab_stop, config.quit_times, config.message_timeout) == (8, 3, 5.0)


def test_config_reads_prefixed_env() -> None:
    config = EditorConfig.from_env(
        {
            "PLUME_TAB_STOP": "4",
            "PLUME_QUIT_TIMES": "1",
            "PLUME_MESSAGE_TIMEOUT": "2.5",
            "PLUME_READ_TIMEOUT": "0.2",
        }
    )

    assert config == EditorConfig(
        tab_stop=4, quit_times=1, message_timeout=2.5, read_timeout=0.2
    )


@pytest.mark.parametrize("raw", ["zero", "0", "-3", ""])
def test_config_rejects_bad_values(raw: str) -> None:
    assert EditorConfig.from_env({"PLUME_TAB_STOP": raw}).tab_stop == 8


@pytest.mark.parametrize(
    ("payload", "expected"),
    [
        (b"", []),
        (b"one", [b"one"]),
        (b"one\ntwo\n", [b"one", b"two"]),
        (b"one\r\ntwo\r\n", [b"one", b"two"]),
        (b"one\n\n", [b"one", b""]),
        (b"\tx\xff\n", [b"\tx\xff"]),
    ],
)
def test_load_lines_strips_line_endings(tmp_path, payload: bytes, expected) -> None:
    target = tmp_path / "doc.txt"
    target.write_bytes(payload)

    assert load_lines(str(target)) == expected


def test_load_missing_file_raises(tmp_path) -> None:
    missing = tmp_path / "absent.txt"

    with pytest.raises(DocumentLoadError) as info:
        load_lines(str(missing))

    assert info.value.path == str(missing)


def test_open_session_starts_clean(tmp_path) -> None:
    target = tmp_path / "doc.txt"
    target.write_bytes(b"alpha\nbeta\n")

    session = EditorSession.open(str(target))

    assert session.buffer.lines() == [b"alpha", b"beta"]
    assert session.buffer.dirty == 0
    assert session.filename == str(target)


def test_write_document_truncates_existing_file(tmp_path) -> None:
    target = tmp_path / "doc.txt"
    target.write_bytes(b"a much longer previous body\n")

    written = write_document(str(target), b"short\n")

    assert written == 6
    assert target.read_bytes() == b"short\n"


def test_write_document_creates_file(tmp_path) -> None:
    target = tmp_path / "fresh.txt"

    assert write_document(str(target), b"") == 0
    assert target.read_bytes() == b""


def test_write_document_propagates_os_errors(tmp_path) -> None:
    with pytest.raises(OSError):
        write_document(str(tmp_path / "no" / "such" / "dir.txt"), b"x")


def test_session_save_requires_filename() -> None:
    session = EditorSession.new()

    with pytest.raises(ValueError):
        session.save()
