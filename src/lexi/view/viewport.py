"""Scroll offsets that keep the cursor inside the visible window."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from lexi.buffer import Cursor, Document


@dataclass(slots=True)
class Viewport:
    """Top-left corner of the visible window, in render coordinates.

    ``rows``/``cols`` describe the text area only; the status and message
    bars are not part of it.
    """

    rows: int
    cols: int
    row_offset: int = 0
    col_offset: int = 0

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError("viewport needs at least one row and one column")

    def scroll(self, document: Document, cursor: Cursor) -> None:
        """Recompute ``cursor.render_col`` and shift the offsets minimally."""

        line = document.get_line(cursor.row)
        cursor.render_col = line.edit_to_render(cursor.col) if line is not None else 0

        if cursor.row < self.row_offset:
            self.row_offset = cursor.row
        if cursor.row >= self.row_offset + self.rows:
            self.row_offset = cursor.row - self.rows + 1
        if cursor.render_col < self.col_offset:
            self.col_offset = cursor.render_col
        if cursor.render_col >= self.col_offset + self.cols:
            self.col_offset = cursor.render_col - self.cols + 1

    def screen_position(self, cursor: Cursor) -> Tuple[int, int]:
        """Zero-based (row, column) of the cursor on screen."""

        return (cursor.row - self.row_offset, cursor.render_col - self.col_offset)

    def contains(self, cursor: Cursor) -> bool:
        row, col = self.screen_position(cursor)
        return 0 <= row < self.rows and 0 <= col < self.cols

    def snapshot(self) -> Tuple[int, int]:
        return (self.row_offset, self.col_offset)

    def restore(self, offsets: Tuple[int, int]) -> None:
        self.row_offset, self.col_offset = offsets

    def resize(self, rows: int, cols: int) -> None:
        self.rows = rows
        self.cols = cols


__all__ = ["Viewport"]
