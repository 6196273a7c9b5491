"""Viewport scrolling and full-frame rendering."""

from .message import StatusMessage
from .renderer import Frame, FrameRenderer, clear_screen, cursor_to
from .viewport import Viewport

__all__ = [
    "Frame",
    "FrameRenderer",
    "StatusMessage",
    "Viewport",
    "clear_screen",
    "cursor_to",
]
