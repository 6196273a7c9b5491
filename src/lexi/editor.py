"""The editor controller: owns the document, cursor, and viewport."""

from __future__ import annotations

import time
from typing import Callable, Optional, Tuple

from lexi.buffer import Cursor, Document
from lexi.config import DEFAULT_CONFIG, HELP_MESSAGE, EditorConfig
from lexi.errors import EditorFileError, TerminalError
from lexi.keymaps import KeyDecoder, KeymapRegistry, KeyStroke
from lexi.keymaps.defaults import SELF_INSERT, load_default_keymaps
from lexi.modes import ModeResult, PromptEngine
from lexi.runtime import telemetry
from lexi.terminal import TerminalIO, files
from lexi.view import Frame, FrameRenderer, StatusMessage, Viewport, clear_screen

# Rows taken by the status bar and the message bar.
RESERVED_ROWS = 2


class Editor:
    """Single-threaded read-key / dispatch / render loop.

    All mutable editing state hangs off this object; actions receive it as
    their first argument.
    """

    def __init__(
        self,
        terminal: TerminalIO,
        *,
        config: EditorConfig = DEFAULT_CONFIG,
        registry: Optional[KeymapRegistry] = None,
        window: Optional[Tuple[int, int]] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.terminal = terminal
        self.config = config
        self.clock = clock

        rows, cols = window or terminal.window_size()
        if rows <= RESERVED_ROWS or cols <= 0:
            raise TerminalError("getWindowSize", f"terminal too small ({rows}x{cols})")
        self.viewport = Viewport(rows=rows - RESERVED_ROWS, cols=cols)

        self.document = Document(tab_stop=config.tab_stop)
        self.cursor = Cursor()
        self.filename: Optional[str] = None
        self.message = StatusMessage()
        self.quit_remaining = config.quit_times

        if registry is None:
            registry = KeymapRegistry(logger_name="lexi.keymaps")
            load_default_keymaps(registry)
        self.registry = registry

        self.renderer = FrameRenderer(config)
        self.decoder = KeyDecoder(terminal.read_byte, on_idle=self._on_idle)
        self.prompt = PromptEngine(self)
        self._message_on_screen = False

    def open(self, path: str) -> None:
        try:
            lines = files.read_lines(path)
        except OSError as exc:
            telemetry.record_event(
                "file.open_failed", level="error", data={"path": path, "error": exc}
            )
            raise EditorFileError(path, exc.strerror or exc) from exc
        self.document = Document.from_lines(lines, tab_stop=self.config.tab_stop)
        self.filename = path
        self.cursor = Cursor()
        self.viewport.restore((0, 0))
        telemetry.record_event(
            "file.opened", data={"path": path, "lines": self.document.line_count}
        )

    def set_message(self, text: str) -> None:
        self.message.set(text, self.clock())

    def reset_quit_counter(self) -> None:
        self.quit_remaining = self.config.quit_times

    def frame(self) -> Frame:
        return Frame(
            document=self.document,
            cursor=self.cursor,
            viewport=self.viewport,
            message=self.message,
            now=self.clock(),
            filename=self.filename,
        )

    def refresh_screen(self) -> None:
        frame = self.frame()
        self.terminal.write(self.renderer.compose(frame))
        self._message_on_screen = self.message.visible(
            frame.now, self.config.message_timeout
        )

    def read_key(self) -> KeyStroke:
        return self.decoder.read_key()

    def dispatch(self, stroke: KeyStroke) -> ModeResult:
        action = self.registry.lookup(stroke) or SELF_INSERT
        with telemetry.span(
            "editor::keypress",
            component="editor",
            metadata={"key": stroke.token, "action": action.id},
        ) as handle:
            outcome = action(self, stroke)
            result = outcome if isinstance(outcome, ModeResult) else ModeResult()
            handle.add_metadata("status", result.status)
        return result

    def process_keypress(self) -> ModeResult:
        return self.dispatch(self.read_key())

    def run(self) -> None:
        self.set_message(HELP_MESSAGE)
        while True:
            self.refresh_screen()
            result = self.process_keypress()
            if result.quit:
                break
        self.terminal.write(clear_screen())

    def _on_idle(self) -> None:
        # Repaint once when a displayed message outlives its timeout.
        if self._message_on_screen and not self.message.visible(
            self.clock(), self.config.message_timeout
        ):
            self.refresh_screen()


__all__ = ["Editor", "RESERVED_ROWS"]
