"""Command-line entry point: ``plume [FILE]``."""

from __future__ import annotations

import argparse
import signal
import sys
from typing import Optional, Sequence

from plume.editor import Editor
from plume.errors import PlumeError
from plume.runtime import EditorConfig, telemetry
from plume.session import EditorSession
from plume.terminal import FdByteSink, FdByteSource, RawMode, query_window_size


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="plume", description="Edit a plain-text file in the terminal."
    )
    parser.add_argument("filename", nargs="?", help="file to open at startup")
    parser.add_argument(
        "--log-file",
        default=None,
        help="write the telemetry log here (default: $PLUME_LOG_FILE)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="minimum log level (default: $PLUME_LOG_LEVEL or INFO)",
    )
    return parser.parse_args(argv)


def _open_session(filename: Optional[str], config: EditorConfig) -> EditorSession:
    if filename:
        return EditorSession.open(filename, config=config)
    return EditorSession.new(config=config)


def run_editor(filename: Optional[str], *, stdin_fd: int, stdout_fd: int) -> None:
    config = EditorConfig.from_env()
    sink = FdByteSink(stdout_fd)
    with RawMode(stdin_fd):
        rows, cols = query_window_size(stdout_fd)
        session = _open_session(filename, config)
        session.resize(rows, cols)
        editor = Editor(
            session,
            FdByteSource(stdin_fd, timeout=config.read_timeout),
            sink,
            geometry=lambda: query_window_size(stdout_fd),
        )
        previous = signal.signal(
            signal.SIGWINCH, lambda _signum, _frame: editor.request_resize()
        )
        try:
            editor.run()
        finally:
            signal.signal(signal.SIGWINCH, previous)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    if args.log_file is not None or args.log_level is not None:
        telemetry.configure(
            config=telemetry.build_config(level=args.log_level, log_file=args.log_file)
        )

    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    try:
        run_editor(args.filename, stdin_fd=stdin_fd, stdout_fd=stdout_fd)
    except PlumeError as exc:
        FdByteSink(stdout_fd).write_bytes(b"\x1b[2J\x1b[H")
        telemetry.record_event("editor.fatal", level="error", data={"error": str(exc)})
        print(f"plume: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - manual entry point
    sys.exit(main())
