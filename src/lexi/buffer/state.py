"""Cursor position tracked in edit coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .document import Document


@dataclass(slots=True)
class Cursor:
    """Edit-space cursor.

    ``row`` may equal ``document.line_count`` (the synthetic row past the
    last line). ``render_col`` is derived from ``col`` once per frame by the
    viewport.
    """

    row: int = 0
    col: int = 0
    render_col: int = 0

    @property
    def position(self) -> Tuple[int, int]:
        return (self.row, self.col)

    def move_to(self, row: int, col: int) -> None:
        self.row = row
        self.col = col

    def snap_to_line(self, document: Document) -> None:
        """Clamp ``col`` to the length of the line under the cursor."""

        line = document.get_line(self.row)
        length = len(line) if line is not None else 0
        if self.col > length:
            self.col = length

    def is_valid(self, document: Document) -> bool:
        if self.row < 0 or self.row > document.line_count:
            return False
        line = document.get_line(self.row)
        if line is None:
            return self.col >= 0
        return 0 <= self.col <= len(line)


__all__ = ["Cursor"]
