"""Modal prompt loop and the incremental search built on it."""

from .base_mode import KeystrokeObserver, ModeResult, PromptHost
from .prompt import PromptEngine
from .search import BACKWARD, FORWARD, SearchObserver, incremental_search

__all__ = [
    "BACKWARD",
    "FORWARD",
    "KeystrokeObserver",
    "ModeResult",
    "PromptEngine",
    "PromptHost",
    "SearchObserver",
    "incremental_search",
]
