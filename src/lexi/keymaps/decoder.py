"""Turns raw terminal bytes into logical keys.

The byte source returns ``None`` when nothing arrives within its read
timeout. The first byte of a key is waited for indefinitely (retrying on
``None``); bytes following an escape are read once each, and a missing or
unexpected byte collapses the whole sequence to a bare ``ESC``.
"""

from __future__ import annotations

from typing import Callable, Mapping, Optional

from .models import (
    BACKSPACE,
    CTRL,
    DELETE,
    DOWN,
    END,
    ENTER,
    ESC,
    HOME,
    LEFT,
    PAGE_DOWN,
    PAGE_UP,
    RIGHT,
    TAB,
    UP,
    KeyStroke,
)

ByteSource = Callable[[], Optional[int]]

ESC_BYTE = 0x1B

# ESC [ <digit> ~
TILDE_KEYS: Mapping[str, str] = {
    "1": HOME,
    "3": DELETE,
    "4": END,
    "5": PAGE_UP,
    "6": PAGE_DOWN,
    "7": HOME,
    "8": END,
}

# ESC [ <letter>
CSI_KEYS: Mapping[str, str] = {
    "A": UP,
    "B": DOWN,
    "C": RIGHT,
    "D": LEFT,
    "H": HOME,
    "F": END,
}

# ESC O <letter>
SS3_KEYS: Mapping[str, str] = {
    "H": HOME,
    "F": END,
}


def byte_to_stroke(byte: int) -> KeyStroke:
    """Classify a single non-escape byte."""

    if byte == 0x0D:
        return KeyStroke(key=ENTER, code=byte)
    if byte == 0x09:
        return KeyStroke(key=TAB, text="\t", code=byte)
    if byte == 0x7F:
        return KeyStroke(key=BACKSPACE, code=byte)
    if byte == ESC_BYTE:
        return KeyStroke(key=ESC, code=byte)
    if byte < 0x20:
        return KeyStroke(key=chr(byte | 0x40).lower(), modifiers=(CTRL,), code=byte)
    return KeyStroke(key=chr(byte), text=chr(byte), code=byte)


class KeyDecoder:
    """Reads exactly one logical key per ``read_key`` call."""

    def __init__(
        self,
        read_byte: ByteSource,
        *,
        on_idle: Optional[Callable[[], None]] = None,
    ) -> None:
        self._read_byte = read_byte
        self._on_idle = on_idle

    def read_key(self) -> KeyStroke:
        byte = self._wait_for_byte()
        if byte != ESC_BYTE:
            return byte_to_stroke(byte)
        return self._decode_escape()

    def _wait_for_byte(self) -> int:
        while True:
            byte = self._read_byte()
            if byte is not None:
                return byte
            if self._on_idle is not None:
                self._on_idle()

    def _next_char(self) -> Optional[str]:
        byte = self._read_byte()
        if byte is None:
            return None
        return chr(byte)

    def _decode_escape(self) -> KeyStroke:
        bare = KeyStroke(key=ESC, code=ESC_BYTE)

        first = self._next_char()
        if first is None:
            return bare
        second = self._next_char()
        if second is None:
            return bare

        if first == "[":
            if "0" <= second <= "9":
                third = self._next_char()
                if third != "~":
                    return bare
                name = TILDE_KEYS.get(second)
            else:
                name = CSI_KEYS.get(second)
        elif first == "O":
            name = SS3_KEYS.get(second)
        else:
            name = None

        if name is None:
            return bare
        return KeyStroke(key=name)


__all__ = ["ByteSource", "KeyDecoder", "byte_to_stroke"]
