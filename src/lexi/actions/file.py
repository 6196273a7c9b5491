"""Save, quit, and find actions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lexi.config import SAVE_AS_PROMPT
from lexi.keymaps.models import KeyStroke
from lexi.modes.base_mode import ModeResult
from lexi.modes.search import incremental_search
from lexi.runtime import telemetry
from lexi.terminal import files

if TYPE_CHECKING:
    from lexi.editor import Editor


def save(editor: "Editor", stroke: KeyStroke | None = None) -> ModeResult:
    del stroke
    if editor.filename is None:
        name = editor.prompt.run(SAVE_AS_PROMPT)
        if name is None:
            editor.set_message("Save aborted")
            telemetry.record_event("file.save_aborted")
            return ModeResult(status="save_aborted", message="Save aborted")
        editor.filename = name

    payload = editor.document.serialize()
    with telemetry.span(
        "file::save", component="file", metadata={"path": editor.filename}
    ) as handle:
        try:
            written = files.write_file(editor.filename, payload)
        except OSError as exc:
            reason = exc.strerror or str(exc)
            handle.add_metadata("error", reason)
            telemetry.record_event(
                "file.save_failed",
                level="error",
                data={"path": editor.filename, "error": reason},
            )
            message = f"Can't save! I/O error: {reason}"
            editor.set_message(message)
            return ModeResult(status="save_failed", message=message)

    editor.document.mark_clean()
    editor.reset_quit_counter()
    message = f"{written} bytes written to disk"
    editor.set_message(message)
    telemetry.record_event(
        "file.saved", data={"path": editor.filename, "bytes": written}
    )
    return ModeResult(status="saved", message=message)


def quit_editor(editor: "Editor", stroke: KeyStroke | None = None) -> ModeResult:
    del stroke
    if editor.document.is_dirty and editor.quit_remaining > 0:
        message = (
            "WARNING!!! File has unsaved changes. "
            f"Press Ctrl-E {editor.quit_remaining} more times to quit."
        )
        editor.set_message(message)
        telemetry.record_event(
            "editor.quit_blocked",
            level="warning",
            data={"remaining": editor.quit_remaining},
        )
        editor.quit_remaining -= 1
        return ModeResult(status="quit_blocked", message=message)

    telemetry.record_event("editor.quit", data={"dirty": editor.document.dirty})
    return ModeResult(status="quit", quit=True)


def find(editor: "Editor", stroke: KeyStroke | None = None) -> ModeResult:
    del stroke
    query = incremental_search(
        editor.prompt, editor.document, editor.cursor, editor.viewport
    )
    if query is None:
        return ModeResult(status="search_cancelled")
    return ModeResult(status="search", message=query)


__all__ = ["find", "quit_editor", "save"]
