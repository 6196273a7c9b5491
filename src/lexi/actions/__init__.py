"""Editing verbs bound to keys by the default keymap."""

from .edit import (
    delete_backward,
    delete_char,
    delete_forward,
    insert_char,
    insert_newline,
    newline,
    noop,
    self_insert,
)
from .file import find, quit_editor, save
from .movement import arrow, line_end, line_start, move_cursor, page_down, page_up

__all__ = [
    "arrow",
    "delete_backward",
    "delete_char",
    "delete_forward",
    "find",
    "insert_char",
    "insert_newline",
    "line_end",
    "line_start",
    "move_cursor",
    "newline",
    "noop",
    "page_down",
    "page_up",
    "quit_editor",
    "save",
    "self_insert",
]
