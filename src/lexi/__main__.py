"""Process entry point: ``lexi [path]``."""

from __future__ import annotations

import argparse
import sys
from contextlib import suppress
from typing import Optional, Sequence

from lexi.config import DEFAULT_CONFIG
from lexi.editor import Editor
from lexi.errors import EditorFileError, TerminalError
from lexi.runtime import telemetry
from lexi.terminal import RawTerminal
from lexi.view import clear_screen


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lexi", description="Terminal text editor")
    parser.add_argument("path", nargs="?", help="file to open")
    return parser


def die(terminal: RawTerminal, error: BaseException) -> int:
    """Clear the screen, report ``error`` on stderr, and return exit status 1."""

    with suppress(TerminalError):
        terminal.write(clear_screen())
    telemetry.record_event("editor.fatal", level="error", data={"error": error})
    print(error, file=sys.stderr)
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    telemetry.configure(preset="terminal")

    terminal = RawTerminal(read_timeout=DEFAULT_CONFIG.read_timeout)
    try:
        with terminal:
            editor = Editor(terminal)
            if args.path:
                editor.open(args.path)
            editor.run()
    except (TerminalError, EditorFileError) as exc:
        return die(terminal, exc)
    return 0


if __name__ == "__main__":
    sys.exit(main())
