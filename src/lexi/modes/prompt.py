"""Modal single-line input drawn in the message bar."""

from __future__ import annotations

from typing import List, Optional

from lexi.keymaps.models import BACKSPACE, DELETE, ENTER, ESC, KeyStroke
from lexi.runtime import telemetry

from .base_mode import KeystrokeObserver, PromptHost

ERASE_KEYS = frozenset({BACKSPACE, DELETE, "ctrl+h"})


def _accepts_char(key: KeyStroke) -> bool:
    return key.is_printable and key.code is not None and 0x20 <= key.code < 0x7F


class PromptEngine:
    """Runs one blocking prompt at a time on behalf of ``host``."""

    def __init__(self, host: PromptHost) -> None:
        self.host = host

    def run(
        self, template: str, observer: Optional[KeystrokeObserver] = None
    ) -> Optional[str]:
        """Collect a line of input; ``None`` means the user pressed Escape.

        ``template`` receives the current input through a single ``%s``.
        Enter only confirms a non-empty buffer.
        """

        watcher = observer or KeystrokeObserver()
        typed: List[str] = []
        with telemetry.span(
            "prompt::run", component="prompt", metadata={"template": template}
        ) as handle:
            while True:
                text = "".join(typed)
                self.host.set_message(template % text)
                self.host.refresh_screen()
                key = self.host.read_key()

                if key.key in ERASE_KEYS or key.token in ERASE_KEYS:
                    if typed:
                        typed.pop()
                elif key.key == ESC:
                    self.host.set_message("")
                    watcher.on_keystroke(text, key)
                    handle.add_metadata("status", "cancel")
                    return None
                elif key.key == ENTER:
                    if typed:
                        self.host.set_message("")
                        watcher.on_keystroke(text, key)
                        handle.add_metadata("status", "confirm")
                        return text
                elif _accepts_char(key):
                    typed.append(key.text or "")

                watcher.on_keystroke("".join(typed), key)


__all__ = ["PromptEngine"]
