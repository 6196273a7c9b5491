"""Ordered line store backing the editor."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Sequence

from lexi.runtime import telemetry

from .line import Line
from .render import DEFAULT_TAB_STOP

LINE_TERMINATOR = "\n"


class Document:
    """List-of-lines storage with a modification counter.

    Every content or structural mutation bumps ``dirty``; ``mark_clean``
    resets it after a successful save. Row arguments that fall outside the
    store make the operation a no-op that returns ``False``.
    """

    def __init__(
        self,
        lines: Optional[Iterable[str]] = None,
        *,
        tab_stop: int = DEFAULT_TAB_STOP,
    ) -> None:
        self.tab_stop = tab_stop
        self._lines: List[Line] = [
            Line(text, tab_stop=tab_stop) for text in (lines or ())
        ]
        self.dirty = 0

    @classmethod
    def from_lines(
        cls, lines: Iterable[str], *, tab_stop: int = DEFAULT_TAB_STOP
    ) -> "Document":
        return cls(lines, tab_stop=tab_stop)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self._lines)

    def __getitem__(self, index: int) -> Line:
        return self._lines[index]

    def get_line(self, index: int) -> Optional[Line]:
        if 0 <= index < len(self._lines):
            return self._lines[index]
        return None

    def texts(self) -> Sequence[str]:
        return tuple(line.text for line in self._lines)

    @property
    def is_dirty(self) -> bool:
        return self.dirty > 0

    def mark_clean(self) -> None:
        self.dirty = 0

    def serialize(self) -> str:
        """Concatenate every line, each followed by one terminator."""

        return "".join(line.text + LINE_TERMINATOR for line in self._lines)

    def insert_line(self, at: int, text: str = "") -> bool:
        if at < 0 or at > len(self._lines):
            return self._out_of_range("insert_line", at)
        with telemetry.span(
            "buffer::insert_line", component="buffer", metadata={"row": at}
        ):
            self._lines.insert(at, Line(text, tab_stop=self.tab_stop))
            self.dirty += 1
        return True

    def delete_line(self, at: int) -> bool:
        if at < 0 or at >= len(self._lines):
            return self._out_of_range("delete_line", at)
        with telemetry.span(
            "buffer::delete_line", component="buffer", metadata={"row": at}
        ):
            del self._lines[at]
            self.dirty += 1
        return True

    def insert_char(self, row: int, col: int, char: str) -> bool:
        line = self.get_line(row)
        if line is None:
            return self._out_of_range("insert_char", row)
        text = line.text
        if col < 0 or col > len(text):
            return self._out_of_range("insert_char", row)
        line.text = text[:col] + char + text[col:]
        self.dirty += 1
        return True

    def delete_char(self, row: int, col: int) -> bool:
        """Remove the character immediately before ``col`` on ``row``."""

        line = self.get_line(row)
        if line is None:
            return self._out_of_range("delete_char", row)
        text = line.text
        if col <= 0 or col > len(text):
            return False
        line.text = text[: col - 1] + text[col:]
        self.dirty += 1
        return True

    def append_text(self, row: int, text: str) -> bool:
        line = self.get_line(row)
        if line is None:
            return self._out_of_range("append_text", row)
        line.text = line.text + text
        self.dirty += 1
        return True

    def split_line(self, row: int, col: int) -> bool:
        """Move everything from ``col`` onwards into a new line below ``row``."""

        line = self.get_line(row)
        if line is None:
            return self._out_of_range("split_line", row)
        text = line.text
        col = min(max(col, 0), len(text))
        with telemetry.span(
            "buffer::split_line",
            component="buffer",
            metadata={"row": row, "col": col},
        ):
            self._lines.insert(row + 1, Line(text[col:], tab_stop=self.tab_stop))
            line.text = text[:col]
            self.dirty += 1
        return True

    def join_lines(self, row: int) -> bool:
        """Append line ``row + 1`` onto line ``row`` and remove it."""

        if row < 0 or row + 1 >= len(self._lines):
            return self._out_of_range("join_lines", row)
        with telemetry.span(
            "buffer::join_lines", component="buffer", metadata={"row": row}
        ):
            following = self._lines[row + 1]
            self.append_text(row, following.text)
            self.delete_line(row + 1)
        return True

    def _out_of_range(self, operation: str, row: int) -> bool:
        telemetry.record_event(
            "document.out_of_range",
            level="debug",
            data={"operation": operation, "row": row, "lines": len(self._lines)},
        )
        return False


__all__ = ["Document", "LINE_TERMINATOR"]
