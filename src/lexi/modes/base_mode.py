"""Shared result type and the seams modal interactions plug into."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from lexi.keymaps.models import KeyStroke


@dataclass(slots=True)
class ModeResult:
    """Outcome of dispatching one key through an action."""

    consumed: bool = True
    status: str = "ok"
    message: Optional[str] = None
    quit: bool = False


class PromptHost(Protocol):
    """What a modal prompt needs from the editor that runs it."""

    def set_message(self, text: str) -> None:
        ...

    def refresh_screen(self) -> None:
        ...

    def read_key(self) -> KeyStroke:
        ...


class KeystrokeObserver:
    """Receives ``(current_buffer, last_key)`` after every prompt keystroke.

    The base class is the "no observer" variant; ``SearchObserver`` is the
    stateful one.
    """

    def on_keystroke(self, query: str, key: KeyStroke) -> None:
        del query, key


__all__ = ["KeystrokeObserver", "ModeResult", "PromptHost"]
