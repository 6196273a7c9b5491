from __future__ import annotations

from typing import List, Optional

import pytest

from lexi.keymaps import KeyDecoder, KeyStroke, byte_to_stroke
from lexi.keymaps import models

from conftest import FakeTerminal


def decode_all(script, count: int) -> List[KeyStroke]:
    terminal = FakeTerminal(script)
    decoder = KeyDecoder(terminal.read_byte)
    return [decoder.read_key() for _ in range(count)]


def decode_one(script) -> KeyStroke:
    return decode_all(script, 1)[0]


@pytest.mark.parametrize(
    ("sequence", "expected"),
    [
        (b"\x1b[A", models.UP),
        (b"\x1b[B", models.DOWN),
        (b"\x1b[C", models.RIGHT),
        (b"\x1b[D", models.LEFT),
        (b"\x1b[H", models.HOME),
        (b"\x1b[F", models.END),
        (b"\x1bOH", models.HOME),
        (b"\x1bOF", models.END),
        (b"\x1b[1~", models.HOME),
        (b"\x1b[3~", models.DELETE),
        (b"\x1b[4~", models.END),
        (b"\x1b[5~", models.PAGE_UP),
        (b"\x1b[6~", models.PAGE_DOWN),
        (b"\x1b[7~", models.HOME),
        (b"\x1b[8~", models.END),
    ],
)
def test_escape_sequences(sequence: bytes, expected: str) -> None:
    assert decode_one(sequence).key == expected


def test_bare_escape_when_nothing_follows() -> None:
    assert decode_one(b"\x1b").key == models.ESC


def test_timeout_inside_sequence_degrades_to_escape() -> None:
    script: List[Optional[int]] = [0x1B, ord("["), None, ord("A")]
    keys = decode_all(script, 2)

    assert keys[0].key == models.ESC
    assert keys[1].key == "A"
    assert keys[1].text == "A"


@pytest.mark.parametrize(
    "sequence",
    [b"\x1b[2~", b"\x1b[9~", b"\x1b[3x", b"\x1b[Z", b"\x1bOA", b"\x1bxy"],
)
def test_unrecognized_sequences_become_escape(sequence: bytes) -> None:
    assert decode_one(sequence).key == models.ESC


def test_timeouts_before_a_key_are_retried() -> None:
    idle_calls: List[int] = []
    terminal = FakeTerminal([None, None, None, ord("q")])
    decoder = KeyDecoder(terminal.read_byte, on_idle=lambda: idle_calls.append(1))

    key = decoder.read_key()

    assert key.text == "q"
    assert len(idle_calls) == 3


def test_keys_after_sequence_are_not_consumed() -> None:
    keys = decode_all(b"\x1b[Cx", 2)

    assert keys[0].key == models.RIGHT
    assert keys[1].text == "x"


def test_single_byte_classification() -> None:
    assert byte_to_stroke(13).key == models.ENTER
    assert byte_to_stroke(127).key == models.BACKSPACE
    assert byte_to_stroke(9).key == models.TAB
    assert byte_to_stroke(9).text == "\t"

    ctrl_s = byte_to_stroke(0x13)
    assert ctrl_s.token == "ctrl+s"
    assert ctrl_s.text is None
    assert ctrl_s.code == 0x13

    letter = byte_to_stroke(ord("a"))
    assert letter.token == "a"
    assert letter.is_printable


def test_keystroke_helpers() -> None:
    assert KeyStroke.ctrl("E").token == "ctrl+e"
    assert KeyStroke.ctrl("e").code == 5
    assert KeyStroke.char("z").text == "z"
    with pytest.raises(ValueError):
        KeyStroke(key="")
