"""Text editing actions and the cursor-aware edit primitives behind them."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lexi.buffer import Cursor, Document
from lexi.keymaps.models import RIGHT, KeyStroke
from lexi.modes.base_mode import ModeResult

from .movement import move_cursor

if TYPE_CHECKING:
    from lexi.editor import Editor


def insert_char(document: Document, cursor: Cursor, char: str) -> None:
    if cursor.row == document.line_count:
        document.insert_line(document.line_count, "")
    if document.insert_char(cursor.row, cursor.col, char):
        cursor.col += 1


def insert_newline(document: Document, cursor: Cursor) -> None:
    if cursor.col == 0:
        document.insert_line(cursor.row, "")
    else:
        document.split_line(cursor.row, cursor.col)
    cursor.move_to(cursor.row + 1, 0)


def delete_char(document: Document, cursor: Cursor) -> None:
    """Delete the character before the cursor, joining lines at column 0."""

    if cursor.row == document.line_count:
        return
    if cursor.row == 0 and cursor.col == 0:
        return
    if cursor.col > 0:
        document.delete_char(cursor.row, cursor.col)
        cursor.col -= 1
    else:
        previous_length = len(document[cursor.row - 1])
        document.join_lines(cursor.row - 1)
        cursor.move_to(cursor.row - 1, previous_length)


def self_insert(editor: "Editor", stroke: KeyStroke) -> ModeResult:
    if stroke.text is None or stroke.modifiers:
        return ModeResult(consumed=False, status="ignored")
    insert_char(editor.document, editor.cursor, stroke.text)
    return ModeResult(status="insert")


def newline(editor: "Editor", stroke: KeyStroke) -> ModeResult:
    del stroke
    insert_newline(editor.document, editor.cursor)
    return ModeResult(status="newline")


def delete_backward(editor: "Editor", stroke: KeyStroke) -> ModeResult:
    del stroke
    delete_char(editor.document, editor.cursor)
    return ModeResult(status="delete")


def delete_forward(editor: "Editor", stroke: KeyStroke) -> ModeResult:
    del stroke
    move_cursor(editor.document, editor.cursor, RIGHT)
    delete_char(editor.document, editor.cursor)
    return ModeResult(status="delete")


def noop(editor: "Editor", stroke: KeyStroke) -> ModeResult:
    del editor, stroke
    return ModeResult(status="noop")


__all__ = [
    "delete_backward",
    "delete_char",
    "delete_forward",
    "insert_char",
    "insert_newline",
    "newline",
    "noop",
    "self_insert",
]
