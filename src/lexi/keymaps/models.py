"""Dataclasses describing decoded keys, actions, and bindings."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Optional

ESC = "ESC"
ENTER = "ENTER"
BACKSPACE = "BACKSPACE"
TAB = "TAB"
DELETE = "DELETE"
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
HOME = "HOME"
END = "END"
PAGE_UP = "PAGE_UP"
PAGE_DOWN = "PAGE_DOWN"

ARROW_KEYS = frozenset({UP, DOWN, LEFT, RIGHT})
CTRL = "ctrl"


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single logical key produced by the decoder.

    ``code`` keeps the raw byte for keys that arrived as one byte; it is
    ``None`` for keys reconstructed from an escape sequence.
    """

    key: str
    modifiers: tuple[str, ...] = ()
    text: str | None = None
    code: int | None = None

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        if self.modifiers:
            modifier = "+".join(self.modifiers)
            return f"{modifier}+{self.key}"
        return self.key

    @property
    def is_printable(self) -> bool:
        return self.text is not None and not self.modifiers

    @classmethod
    def ctrl(cls, letter: str) -> "KeyStroke":
        letter = letter.lower()
        return cls(key=letter, modifiers=(CTRL,), code=ord(letter) & 0x1F)

    @classmethod
    def char(cls, char: str) -> "KeyStroke":
        return cls(key=char, text=char, code=ord(char))


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Callable metadata used during binding execution."""

    id: str
    handler: Callable[..., object]
    telemetry_name: str | None = None
    description: str = ""
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))
        if self.telemetry_name is None:
            object.__setattr__(self, "telemetry_name", self.id)

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates one key token with an action."""

    id: str
    key: str
    action_id: str
    description: str = ""
    source: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.key:
            raise ValueError("binding key cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")


__all__ = [
    "ARROW_KEYS",
    "BACKSPACE",
    "CTRL",
    "DELETE",
    "DOWN",
    "END",
    "ENTER",
    "ESC",
    "HOME",
    "LEFT",
    "PAGE_DOWN",
    "PAGE_UP",
    "RIGHT",
    "TAB",
    "UP",
    "ActionRef",
    "Binding",
    "KeyStroke",
]
