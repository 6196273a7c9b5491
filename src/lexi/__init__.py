"""Lexi: a small terminal text editor."""

from lexi.config import LEXI_VERSION

__all__ = [
    "actions",
    "buffer",
    "config",
    "editor",
    "keymaps",
    "modes",
    "runtime",
    "terminal",
    "view",
]

__version__ = LEXI_VERSION
