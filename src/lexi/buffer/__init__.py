"""Line store, render cache, and cursor state."""

from .document import LINE_TERMINATOR, Document
from .line import Line
from .render import DEFAULT_TAB_STOP, edit_to_render, expand_tabs, render_to_edit
from .state import Cursor

__all__ = [
    "Cursor",
    "DEFAULT_TAB_STOP",
    "Document",
    "LINE_TERMINATOR",
    "Line",
    "edit_to_render",
    "expand_tabs",
    "render_to_edit",
]
