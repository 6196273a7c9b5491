"""Single editable line paired with its rendered (tab-expanded) form."""

from __future__ import annotations

from .render import DEFAULT_TAB_STOP, edit_to_render, expand_tabs, render_to_edit


class Line:
    """Stores the raw text of one line and keeps ``render`` in step with it.

    ``render`` is rebuilt from scratch on every assignment to ``text``; it is
    never patched in place.
    """

    __slots__ = ("_text", "_render", "tab_stop")

    def __init__(self, text: str = "", *, tab_stop: int = DEFAULT_TAB_STOP) -> None:
        if "\n" in text:
            raise ValueError("line text cannot contain a line terminator")
        self.tab_stop = tab_stop
        self._text = text
        self._render = expand_tabs(text, tab_stop)

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        if "\n" in value:
            raise ValueError("line text cannot contain a line terminator")
        self._text = value
        self._render = expand_tabs(value, self.tab_stop)

    @property
    def render(self) -> str:
        return self._render

    def __len__(self) -> int:
        return len(self._text)

    def __repr__(self) -> str:
        return f"Line({self._text!r})"

    def edit_to_render(self, edit_col: int) -> int:
        return edit_to_render(self._text, edit_col, self.tab_stop)

    def render_to_edit(self, render_col: int) -> int:
        return render_to_edit(self._text, render_col, self.tab_stop)

    def find(self, query: str) -> int:
        """Return the render offset of the first ``query`` hit, or ``-1``."""

        return self._render.find(query)


__all__ = ["Line"]
