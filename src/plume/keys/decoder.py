"""Table-driven decoder turning raw terminal bytes into ``Key`` events."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Protocol, Tuple

from .models import (
    ARROW_DOWN,
    ARROW_LEFT,
    ARROW_RIGHT,
    ARROW_UP,
    CHAR,
    DELETE,
    END,
    ESC_BYTE,
    ESCAPE,
    HOME,
    PAGE_DOWN,
    PAGE_UP,
    Key,
)


class ByteSource(Protocol):
    """Anything that yields one byte at a time with a bounded wait."""

    def read_byte(self) -> Optional[int]:
        """Return the next byte, or ``None`` when the read timed out."""
        ...


CSI_LETTERS: Mapping[int, str] = {
    ord("A"): ARROW_UP,
    ord("B"): ARROW_DOWN,
    ord("C"): ARROW_RIGHT,
    ord("D"): ARROW_LEFT,
    ord("H"): HOME,
    ord("F"): END,
}

CSI_TILDE_DIGITS: Mapping[int, str] = {
    ord("1"): HOME,
    ord("3"): DELETE,
    ord("4"): END,
    ord("5"): PAGE_UP,
    ord("6"): PAGE_DOWN,
    ord("7"): HOME,
    ord("8"): END,
}

SS3_LETTERS: Mapping[int, str] = {
    ord("H"): HOME,
    ord("F"): END,
}

# States of an escape sequence in progress.
AFTER_ESC = "after_esc"
CSI = "csi"
CSI_DIGIT = "csi_digit"
SS3 = "ss3"

ESCAPE_LOOKAHEAD = 2


def classify(byte: int) -> str:
    if byte == ord("["):
        return "["
    if byte == ord("O"):
        return "O"
    if byte == ord("~"):
        return "~"
    if ord("0") <= byte <= ord("9"):
        return "digit"
    if ord("A") <= byte <= ord("Z") or ord("a") <= byte <= ord("z"):
        return "letter"
    return "other"


@dataclass(frozen=True, slots=True)
class Transition:
    """Edge of the escape-sequence automaton.

    Either moves to ``next_state`` or emits the key found in ``emit`` for
    the current byte (``keyed_by_saved`` looks up the remembered digit).
    """

    next_state: Optional[str] = None
    emit: Optional[Mapping[int, str]] = None
    remember: bool = False
    keyed_by_saved: bool = False


TRANSITIONS: Dict[Tuple[str, str], Transition] = {
    (AFTER_ESC, "["): Transition(next_state=CSI),
    (AFTER_ESC, "O"): Transition(next_state=SS3),
    (CSI, "digit"): Transition(next_state=CSI_DIGIT, remember=True),
    (CSI, "letter"): Transition(emit=CSI_LETTERS),
    (CSI_DIGIT, "~"): Transition(emit=CSI_TILDE_DIGITS, keyed_by_saved=True),
    (SS3, "letter"): Transition(emit=SS3_LETTERS),
}

ESCAPE_KEY = Key(ESCAPE)


class InputDecoder:
    """Reads keys from a ``ByteSource``.

    Escape sequences are tokenized greedily: the two bytes after ESC are
    always consumed before classification, and a third is read only to
    confirm the ``~`` terminator. Any missing byte or unknown tail decodes
    to a bare ``ESCAPE``.
    """

    def __init__(self, source: ByteSource) -> None:
        self.source = source

    def poll_key(self) -> Optional[Key]:
        """Make one read attempt; ``None`` means try again."""

        byte = self.source.read_byte()
        if byte is None:
            return None
        if byte != ESC_BYTE:
            return Key(CHAR, byte)
        return self._decode_escape()

    def next_key(self) -> Key:
        while True:
            key = self.poll_key()
            if key is not None:
                return key

    def _decode_escape(self) -> Key:
        pending: List[int] = []
        for _ in range(ESCAPE_LOOKAHEAD):
            byte = self.source.read_byte()
            if byte is None:
                return ESCAPE_KEY
            pending.append(byte)

        state = AFTER_ESC
        saved: Optional[int] = None
        while True:
            if pending:
                byte = pending.pop(0)
            else:
                next_byte = self.source.read_byte()
                if next_byte is None:
                    return ESCAPE_KEY
                byte = next_byte

            transition = TRANSITIONS.get((state, classify(byte)))
            if transition is None:
                return ESCAPE_KEY
            if transition.emit is not None:
                lookup = saved if transition.keyed_by_saved else byte
                kind = transition.emit.get(lookup) if lookup is not None else None
                return Key(kind) if kind else ESCAPE_KEY
            if transition.remember:
                saved = byte
            assert transition.next_state is not None
            state = transition.next_state


__all__ = ["ByteSource", "InputDecoder", "TRANSITIONS", "Transition", "classify"]
