"""OS-facing collaborators: the raw-mode terminal and the backing file."""

from __future__ import annotations

from typing import Optional, Protocol, Tuple

from . import files
from .rawterm import RawTerminal


class TerminalIO(Protocol):
    """Byte-level terminal surface the editor core depends on."""

    def read_byte(self) -> Optional[int]:
        ...

    def write(self, data: str | bytes) -> int:
        ...

    def window_size(self) -> Tuple[int, int]:
        ...


__all__ = ["RawTerminal", "TerminalIO", "files"]
