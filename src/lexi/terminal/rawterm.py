"""Raw-mode terminal access on Unix.

Provides the byte-level collaborator the editor core talks to: a bounded
``read_byte``, a single-call ``write``, and the window size. Raw mode is
restored on every exit path, through the context manager and an ``atexit``
hook as a safety net.
"""

from __future__ import annotations

import atexit
import errno
import fcntl
import os
import re
import struct
import sys
import termios
from typing import Any, List, Optional, Tuple

from lexi.errors import TerminalError
from lexi.runtime import telemetry

from .files import FILE_ENCODING

CURSOR_FAR_CORNER = b"\x1b[999C\x1b[999B"
DEVICE_STATUS_REPORT = b"\x1b[6n"
_CURSOR_REPORT = re.compile(rb"^\x1b\[(\d+);(\d+)$")


class RawTerminal:
    """Owns the terminal attributes for the duration of an editing session."""

    def __init__(
        self,
        fd_in: Optional[int] = None,
        fd_out: Optional[int] = None,
        *,
        read_timeout: float = 0.1,
    ) -> None:
        self.fd_in = sys.stdin.fileno() if fd_in is None else fd_in
        self.fd_out = sys.stdout.fileno() if fd_out is None else fd_out
        self.read_timeout = read_timeout
        self._saved: Optional[List[Any]] = None
        self._atexit_registered = False

    def __enter__(self) -> "RawTerminal":
        self.enable_raw_mode()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.restore()
        return False

    @property
    def raw(self) -> bool:
        return self._saved is not None

    def enable_raw_mode(self) -> None:
        try:
            original = termios.tcgetattr(self.fd_in)
        except termios.error as exc:
            raise TerminalError("tcgetattr", exc) from exc
        self._saved = original
        if not self._atexit_registered:
            atexit.register(self.restore)
            self._atexit_registered = True

        raw = termios.tcgetattr(self.fd_in)
        raw[0] &= ~(
            termios.BRKINT | termios.ICRNL | termios.INPCK | termios.ISTRIP | termios.IXON
        )
        raw[1] &= ~termios.OPOST
        raw[2] |= termios.CS8
        raw[3] &= ~(termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG)
        raw[6][termios.VMIN] = 0
        raw[6][termios.VTIME] = max(1, int(round(self.read_timeout * 10)))
        try:
            termios.tcsetattr(self.fd_in, termios.TCSAFLUSH, raw)
        except termios.error as exc:
            raise TerminalError("tcsetattr", exc) from exc
        telemetry.record_event(
            "terminal.raw_mode", level="debug", data={"fd": self.fd_in}
        )

    def restore(self) -> None:
        if self._saved is None:
            return
        saved, self._saved = self._saved, None
        try:
            termios.tcsetattr(self.fd_in, termios.TCSAFLUSH, saved)
        except termios.error as exc:
            raise TerminalError("tcsetattr", exc) from exc

    def read_byte(self) -> Optional[int]:
        """Return the next input byte, or ``None`` if the read timed out."""

        try:
            data = os.read(self.fd_in, 1)
        except OSError as exc:
            if exc.errno in (errno.EAGAIN, errno.EINTR):
                return None
            raise TerminalError("read", exc) from exc
        if not data:
            return None
        return data[0]

    def write(self, data: str | bytes) -> int:
        payload = data if isinstance(data, bytes) else data.encode(FILE_ENCODING, "replace")
        view = memoryview(payload)
        total = 0
        try:
            while total < len(payload):
                total += os.write(self.fd_out, view[total:])
        except OSError as exc:
            raise TerminalError("write", exc) from exc
        return total

    def window_size(self) -> Tuple[int, int]:
        """Return ``(rows, cols)`` of the whole terminal."""

        try:
            packed = fcntl.ioctl(self.fd_out, termios.TIOCGWINSZ, b"\0" * 8)
            rows, cols, _, _ = struct.unpack("HHHH", packed)
        except OSError:
            rows, cols = 0, 0
        if cols == 0:
            self.write(CURSOR_FAR_CORNER)
            return self.cursor_position()
        return rows, cols

    def cursor_position(self) -> Tuple[int, int]:
        """Ask the terminal where the cursor is via a device status report."""

        self.write(DEVICE_STATUS_REPORT)
        reply = bytearray()
        while len(reply) < 31:
            byte = self.read_byte()
            if byte is None or byte == ord("R"):
                break
            reply.append(byte)
        match = _CURSOR_REPORT.match(bytes(reply))
        if match is None:
            raise TerminalError("getWindowSize", f"unexpected reply {bytes(reply)!r}")
        return int(match.group(1)), int(match.group(2))


__all__ = ["RawTerminal"]
