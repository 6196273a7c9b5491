"""Builds one complete VT100 frame per refresh."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from lexi.buffer import Cursor, Document
from lexi.config import DEFAULT_CONFIG, EditorConfig

from .message import StatusMessage
from .viewport import Viewport

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
CURSOR_HOME = "\x1b[H"
CLEAR_SCREEN = "\x1b[2J"
ERASE_LINE = "\x1b[K"
REVERSE_VIDEO = "\x1b[7m"
RESET_ATTRS = "\x1b[m"
NEWLINE = "\r\n"
FILLER = "~"
NO_NAME = "[No Name]"


def cursor_to(row: int, col: int) -> str:
    """One-based cursor placement directive."""

    return f"\x1b[{row};{col}H"


@dataclass(slots=True)
class Frame:
    """Everything a refresh needs to know about the editor."""

    document: Document
    cursor: Cursor
    viewport: Viewport
    message: StatusMessage
    now: float
    filename: Optional[str] = None


class FrameRenderer:
    """Accumulates a full screen into one string so it can be written at once."""

    def __init__(self, config: EditorConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    def compose(self, frame: Frame) -> str:
        frame.viewport.scroll(frame.document, frame.cursor)
        parts: List[str] = [HIDE_CURSOR, CURSOR_HOME]
        self._draw_rows(parts, frame)
        self._draw_status_bar(parts, frame)
        self._draw_message_bar(parts, frame)
        row, col = frame.viewport.screen_position(frame.cursor)
        parts.append(cursor_to(row + 1, col + 1))
        parts.append(SHOW_CURSOR)
        return "".join(parts)

    def welcome_text(self) -> str:
        return f"Lexi editor -- version {self.config.version}"

    def _draw_rows(self, parts: List[str], frame: Frame) -> None:
        viewport = frame.viewport
        document = frame.document
        cols = viewport.cols
        for y in range(viewport.rows):
            file_row = y + viewport.row_offset
            if file_row >= document.line_count:
                if document.line_count == 0 and y == viewport.rows // 3:
                    parts.append(self._welcome_row(cols))
                else:
                    parts.append(FILLER)
            else:
                render = document[file_row].render
                start = viewport.col_offset
                parts.append(render[start : start + cols])
            parts.append(ERASE_LINE)
            parts.append(NEWLINE)

    def _welcome_row(self, cols: int) -> str:
        welcome = self.welcome_text()[:cols]
        padding = (cols - len(welcome)) // 2
        row = ""
        if padding:
            row = FILLER
            padding -= 1
        return row + " " * padding + welcome

    def _draw_status_bar(self, parts: List[str], frame: Frame) -> None:
        cols = frame.viewport.cols
        document = frame.document
        name = (frame.filename or NO_NAME)[: self.config.filename_width]
        modified = "(modified)" if document.is_dirty else ""
        status = f"{name} - {document.line_count} lines {modified}"[:cols]
        right = f"{frame.cursor.row + 1}/{document.line_count}"

        parts.append(REVERSE_VIDEO)
        parts.append(status)
        length = len(status)
        while length < cols:
            if cols - length == len(right):
                parts.append(right)
                break
            parts.append(" ")
            length += 1
        parts.append(RESET_ATTRS)
        parts.append(NEWLINE)

    def _draw_message_bar(self, parts: List[str], frame: Frame) -> None:
        parts.append(ERASE_LINE)
        message = frame.message
        if message.visible(frame.now, self.config.message_timeout):
            parts.append(message.text[: frame.viewport.cols])


def clear_screen() -> str:
    return CLEAR_SCREEN + CURSOR_HOME


__all__ = [
    "Frame",
    "FrameRenderer",
    "clear_screen",
    "cursor_to",
]
