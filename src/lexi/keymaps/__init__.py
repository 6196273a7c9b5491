"""Key model, raw-byte decoder, and the dispatch registry.

Default bindings live in :mod:`lexi.keymaps.defaults`, which pulls in the
action modules and is therefore imported explicitly by the editor.
"""

from .decoder import KeyDecoder, byte_to_stroke
from .models import ActionRef, Binding, KeyStroke
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats

__all__ = [
    "ActionRef",
    "Binding",
    "KeyDecoder",
    "KeyStroke",
    "KeymapConflictError",
    "KeymapRegistry",
    "RegistryStats",
    "byte_to_stroke",
]
