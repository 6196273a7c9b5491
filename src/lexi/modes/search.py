"""Incremental search driven by the prompt's keystroke observer."""

from __future__ import annotations

from typing import Optional

from lexi.buffer import Cursor, Document
from lexi.config import SEARCH_PROMPT
from lexi.keymaps.models import DOWN, ENTER, ESC, LEFT, RIGHT, UP, KeyStroke
from lexi.runtime import telemetry
from lexi.view import Viewport

from .base_mode import KeystrokeObserver
from .prompt import PromptEngine

FORWARD = 1
BACKWARD = -1


class SearchObserver(KeystrokeObserver):
    """Moves the cursor to the next hit after every prompt keystroke.

    Arrow keys keep the current position and step forward (Right/Down) or
    backward (Left/Up). Any other key restarts a forward scan from the top.
    Enter and Escape end the session.
    """

    def __init__(self, document: Document, cursor: Cursor, viewport: Viewport) -> None:
        self.document = document
        self.cursor = cursor
        self.viewport = viewport
        self.last_match = -1
        self.direction = FORWARD

    def reset(self) -> None:
        self.last_match = -1
        self.direction = FORWARD

    def on_keystroke(self, query: str, key: KeyStroke) -> None:
        if key.key in (ENTER, ESC):
            telemetry.record_event(
                "search.end",
                level="debug",
                data={"key": key.key, "last_match": self.last_match},
            )
            self.reset()
            return
        if key.key in (RIGHT, DOWN):
            self.direction = FORWARD
        elif key.key in (LEFT, UP):
            self.direction = BACKWARD
        else:
            self.reset()

        if self.last_match == -1:
            self.direction = FORWARD
        self._scan(query)

    def _scan(self, query: str) -> Optional[int]:
        count = self.document.line_count
        current = self.last_match
        for _ in range(count):
            current += self.direction
            if current == -1:
                current = count - 1
            elif current == count:
                current = 0
            line = self.document[current]
            offset = line.find(query)
            if offset != -1:
                self.last_match = current
                self.cursor.move_to(current, line.render_to_edit(offset))
                # Forces the next scroll to bring the match to the top.
                self.viewport.row_offset = count
                return current
        return None


def incremental_search(
    prompt: PromptEngine, document: Document, cursor: Cursor, viewport: Viewport
) -> Optional[str]:
    """Run a search prompt; on cancel restore cursor and scroll position."""

    saved_position = cursor.position
    saved_offsets = viewport.snapshot()
    observer = SearchObserver(document, cursor, viewport)
    query = prompt.run(SEARCH_PROMPT, observer)
    if query is None:
        cursor.move_to(*saved_position)
        viewport.restore(saved_offsets)
    return query


__all__ = ["BACKWARD", "FORWARD", "SearchObserver", "incremental_search"]
