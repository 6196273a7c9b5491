from __future__ import annotations

from collections import deque
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, Union

import pytest

from lexi.config import EditorConfig
from lexi.editor import Editor

ESC = b"\x1b"
ENTER = b"\r"
BACKSPACE = b"\x7f"
UP = b"\x1b[A"
DOWN = b"\x1b[B"
RIGHT = b"\x1b[C"
LEFT = b"\x1b[D"


def ctrl(letter: str) -> bytes:
    return bytes([ord(letter.lower()) & 0x1F])


class InputExhausted(AssertionError):
    """Raised when a test reads more keys than it scripted."""


class FakeTerminal:
    """Scripted byte source plus a record of every frame written.

    ``None`` entries in the script model a read that timed out.
    """

    def __init__(
        self,
        script: Union[bytes, Sequence[Optional[int]]] = b"",
        *,
        size: Tuple[int, int] = (12, 40),
        idle_limit: int = 20,
    ) -> None:
        self.pending: deque[Optional[int]] = deque(script)
        self.writes: List[str] = []
        self.size = size
        self.idle_limit = idle_limit
        self._idle = 0

    def feed(self, *chunks: Union[bytes, str]) -> None:
        for chunk in chunks:
            data = chunk.encode("latin-1") if isinstance(chunk, str) else chunk
            self.pending.extend(data)

    def read_byte(self) -> Optional[int]:
        if self.pending:
            self._idle = 0
            return self.pending.popleft()
        self._idle += 1
        if self._idle > self.idle_limit:
            raise InputExhausted("no scripted input left")
        return None

    def write(self, data: Union[str, bytes]) -> int:
        text = data.decode("latin-1") if isinstance(data, bytes) else data
        self.writes.append(text)
        return len(text)

    def window_size(self) -> Tuple[int, int]:
        return self.size

    @property
    def last_frame(self) -> str:
        return self.writes[-1] if self.writes else ""


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_editor(clock: FakeClock) -> Callable[..., Tuple[Editor, FakeTerminal]]:
    def factory(
        lines: Iterable[str] = (),
        *,
        size: Tuple[int, int] = (12, 40),
        config: Optional[EditorConfig] = None,
        filename: Optional[str] = None,
    ) -> Tuple[Editor, FakeTerminal]:
        terminal = FakeTerminal(size=size)
        editor = Editor(terminal, config=config or EditorConfig(), clock=clock)
        for text in lines:
            editor.document.insert_line(editor.document.line_count, text)
        editor.document.mark_clean()
        editor.filename = filename
        return editor, terminal

    return factory
