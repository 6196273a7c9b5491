"""Transient message shown in the bottom bar."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class StatusMessage:
    text: str = ""
    set_at: float = 0.0

    def set(self, text: str, now: float) -> None:
        self.text = text
        self.set_at = now

    def clear(self, now: float) -> None:
        self.set("", now)

    def visible(self, now: float, timeout: float) -> bool:
        return bool(self.text) and now - self.set_at < timeout


__all__ = ["StatusMessage"]
