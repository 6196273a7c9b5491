"""Editor constants grouped into a single immutable configuration."""

from __future__ import annotations

from dataclasses import dataclass

LEXI_VERSION = "0.0.1"


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Tunables for the editor core.

    None of these are exposed to users; they exist so tests can run the
    editor with a tiny window or a shorter message lifetime.
    """

    tab_stop: int = 8
    quit_times: int = 3
    message_timeout: float = 5.0
    read_timeout: float = 0.1
    version: str = LEXI_VERSION
    filename_width: int = 20

    def __post_init__(self) -> None:
        if self.tab_stop <= 0:
            raise ValueError("tab_stop must be positive")
        if self.quit_times < 0:
            raise ValueError("quit_times cannot be negative")


DEFAULT_CONFIG = EditorConfig()

HELP_MESSAGE = "HELP: Ctrl-S = save | Ctrl-E = quit | Ctrl-F = find"
SAVE_AS_PROMPT = "Save as: %s (ESC to cancel)"
SEARCH_PROMPT = "Search: %s (Use ESC/Arrows/Enter)"

__all__ = [
    "EditorConfig",
    "DEFAULT_CONFIG",
    "LEXI_VERSION",
    "HELP_MESSAGE",
    "SAVE_AS_PROMPT",
    "SEARCH_PROMPT",
]
