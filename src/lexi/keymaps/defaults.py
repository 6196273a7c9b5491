"""Built-in keymap seeding the editor's dispatch table."""

from __future__ import annotations

from typing import Iterable, Sequence

from lexi.actions import edit as edit_actions
from lexi.actions import file as file_actions
from lexi.actions import movement as movement_actions

from .models import (
    BACKSPACE,
    DELETE,
    DOWN,
    END,
    ENTER,
    ESC,
    HOME,
    LEFT,
    PAGE_DOWN,
    PAGE_UP,
    RIGHT,
    UP,
    ActionRef,
    Binding,
)
from .registry import KeymapRegistry

SELF_INSERT = ActionRef(
    id="edit.self_insert",
    handler=edit_actions.self_insert,
    description="Insert the typed character",
)

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="move.arrow",
        handler=movement_actions.arrow,
        description="Move the cursor one step",
    ),
    ActionRef(
        id="move.line_start",
        handler=movement_actions.line_start,
        description="Move to the start of the line",
    ),
    ActionRef(
        id="move.line_end",
        handler=movement_actions.line_end,
        description="Move to the end of the line",
    ),
    ActionRef(
        id="move.page_up",
        handler=movement_actions.page_up,
        description="Scroll up one screen",
    ),
    ActionRef(
        id="move.page_down",
        handler=movement_actions.page_down,
        description="Scroll down one screen",
    ),
    ActionRef(
        id="edit.newline",
        handler=edit_actions.newline,
        description="Break the line at the cursor",
    ),
    ActionRef(
        id="edit.delete_backward",
        handler=edit_actions.delete_backward,
        description="Delete the character before the cursor",
    ),
    ActionRef(
        id="edit.delete_forward",
        handler=edit_actions.delete_forward,
        description="Delete the character under the cursor",
    ),
    ActionRef(
        id="edit.noop",
        handler=edit_actions.noop,
        description="Ignore the key",
    ),
    ActionRef(
        id="file.save",
        handler=file_actions.save,
        description="Write the document to disk",
    ),
    ActionRef(
        id="file.quit",
        handler=file_actions.quit_editor,
        description="Quit, confirming unsaved changes",
    ),
    ActionRef(
        id="file.find",
        handler=file_actions.find,
        description="Incremental search",
    ),
    SELF_INSERT,
)

DEFAULT_BINDINGS: tuple[Binding, ...] = (
    Binding(id="move.up", key=UP, action_id="move.arrow"),
    Binding(id="move.down", key=DOWN, action_id="move.arrow"),
    Binding(id="move.left", key=LEFT, action_id="move.arrow"),
    Binding(id="move.right", key=RIGHT, action_id="move.arrow"),
    Binding(id="move.home", key=HOME, action_id="move.line_start"),
    Binding(id="move.end", key=END, action_id="move.line_end"),
    Binding(id="move.page_up", key=PAGE_UP, action_id="move.page_up"),
    Binding(id="move.page_down", key=PAGE_DOWN, action_id="move.page_down"),
    Binding(id="edit.enter", key=ENTER, action_id="edit.newline"),
    Binding(id="edit.backspace", key=BACKSPACE, action_id="edit.delete_backward"),
    Binding(id="edit.ctrl_h", key="ctrl+h", action_id="edit.delete_backward"),
    Binding(id="edit.delete", key=DELETE, action_id="edit.delete_forward"),
    Binding(id="edit.ctrl_l", key="ctrl+l", action_id="edit.noop"),
    Binding(id="edit.escape", key=ESC, action_id="edit.noop"),
    Binding(id="file.save", key="ctrl+s", action_id="file.save"),
    Binding(id="file.quit", key="ctrl+e", action_id="file.quit"),
    Binding(id="file.find", key="ctrl+f", action_id="file.find"),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    include_bindings: Sequence[str] | None = None,
    exclude_bindings: Sequence[str] | None = None,
    extra_bindings: Iterable[Binding] | None = None,
) -> None:
    """Register built-in actions and bindings."""

    allowed_bindings = _build_filters(include_bindings, exclude_bindings)

    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if not _selected(binding.id, allowed_bindings):
            continue
        registry.register_binding(binding, replace=replace)

    if extra_bindings:
        for binding in extra_bindings:
            registry.register_binding(binding, replace=replace)


def _build_filters(
    include: Sequence[str] | None, exclude: Sequence[str] | None
) -> tuple[set[str] | None, set[str]]:
    include_set = set(include) if include else None
    exclude_set = set(exclude or ())
    return include_set, exclude_set


def _selected(item_id: str, filters: tuple[set[str] | None, set[str]]) -> bool:
    include, exclude = filters
    if include is not None and item_id not in include:
        return False
    if item_id in exclude:
        return False
    return True


__all__ = [
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "SELF_INSERT",
    "load_default_keymaps",
]
