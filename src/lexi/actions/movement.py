"""Cursor movement actions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lexi.buffer import Cursor, Document
from lexi.keymaps.models import DOWN, LEFT, RIGHT, UP, KeyStroke
from lexi.modes.base_mode import ModeResult

if TYPE_CHECKING:
    from lexi.editor import Editor


def move_cursor(document: Document, cursor: Cursor, direction: str) -> None:
    """Step one position, wrapping across line ends, then snap the column."""

    line = document.get_line(cursor.row)
    if direction == LEFT:
        if cursor.col != 0:
            cursor.col -= 1
        elif cursor.row > 0:
            cursor.row -= 1
            cursor.col = len(document[cursor.row])
    elif direction == RIGHT:
        if line is not None and cursor.col < len(line):
            cursor.col += 1
        elif line is not None and cursor.col == len(line):
            cursor.row += 1
            cursor.col = 0
    elif direction == UP:
        if cursor.row != 0:
            cursor.row -= 1
    elif direction == DOWN:
        if cursor.row < document.line_count:
            cursor.row += 1
    cursor.snap_to_line(document)


def arrow(editor: "Editor", stroke: KeyStroke) -> ModeResult:
    move_cursor(editor.document, editor.cursor, stroke.key)
    return ModeResult(status="move")


def line_start(editor: "Editor", stroke: KeyStroke) -> ModeResult:
    del stroke
    editor.cursor.col = 0
    return ModeResult(status="move")


def line_end(editor: "Editor", stroke: KeyStroke) -> ModeResult:
    del stroke
    line = editor.document.get_line(editor.cursor.row)
    if line is not None:
        editor.cursor.col = len(line)
    return ModeResult(status="move")


def page_up(editor: "Editor", stroke: KeyStroke) -> ModeResult:
    del stroke
    cursor = editor.cursor
    cursor.row = editor.viewport.row_offset
    for _ in range(editor.viewport.rows):
        move_cursor(editor.document, cursor, UP)
    return ModeResult(status="move")


def page_down(editor: "Editor", stroke: KeyStroke) -> ModeResult:
    del stroke
    cursor = editor.cursor
    document = editor.document
    cursor.row = min(
        editor.viewport.row_offset + editor.viewport.rows - 1, document.line_count
    )
    for _ in range(editor.viewport.rows):
        move_cursor(document, cursor, DOWN)
    return ModeResult(status="move")


__all__ = [
    "arrow",
    "line_end",
    "line_start",
    "move_cursor",
    "page_down",
    "page_up",
]
