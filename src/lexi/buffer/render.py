"""Tab expansion and the edit <-> render column mappings.

Both mappings are pure functions of ``(text, tab_stop)``. A tab advances the
render column to the next multiple of ``tab_stop``; every other character
advances it by one.
"""

from __future__ import annotations

TAB = "\t"
DEFAULT_TAB_STOP = 8


def _advance(render_col: int, char: str, tab_stop: int) -> int:
    if char == TAB:
        return render_col + (tab_stop - render_col % tab_stop)
    return render_col + 1


def expand_tabs(text: str, tab_stop: int = DEFAULT_TAB_STOP) -> str:
    """Return ``text`` with every tab replaced by spaces up to the next stop."""

    if TAB not in text:
        return text
    parts: list[str] = []
    width = 0
    for char in text:
        if char == TAB:
            pad = tab_stop - width % tab_stop
            parts.append(" " * pad)
            width += pad
        else:
            parts.append(char)
            width += 1
    return "".join(parts)


def edit_to_render(text: str, edit_col: int, tab_stop: int = DEFAULT_TAB_STOP) -> int:
    """Map an index into ``text`` to a column of its tab-expanded form."""

    render_col = 0
    for char in text[: max(edit_col, 0)]:
        render_col = _advance(render_col, char, tab_stop)
    return render_col


def render_to_edit(text: str, render_col: int, tab_stop: int = DEFAULT_TAB_STOP) -> int:
    """Map a rendered column back to the first edit index covering it.

    Columns past the rendered end of the line resolve to ``len(text)``.
    """

    current = 0
    for edit_col, char in enumerate(text):
        current = _advance(current, char, tab_stop)
        if current > render_col:
            return edit_col
    return len(text)


__all__ = [
    "DEFAULT_TAB_STOP",
    "expand_tabs",
    "edit_to_render",
    "render_to_edit",
]
