"""Fatal error types raised by the OS-facing collaborators."""

from __future__ import annotations


class TerminalError(RuntimeError):
    """Terminal control was lost; the editor cannot continue safely."""

    def __init__(self, operation: str, error: BaseException | str) -> None:
        super().__init__(f"{operation}: {error}")
        self.operation = operation
        self.error = error


class EditorFileError(RuntimeError):
    """The file named on the command line could not be opened."""

    def __init__(self, path: str, error: BaseException | str) -> None:
        super().__init__(f"{path}: {error}")
        self.path = path
        self.error = error


__all__ = ["EditorFileError", "TerminalError"]
