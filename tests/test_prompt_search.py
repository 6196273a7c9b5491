from __future__ import annotations

from collections import deque
from typing import Iterable, List, Tuple

from lexi.actions import find
from lexi.keymaps import KeyStroke, byte_to_stroke
from lexi.keymaps import models
from lexi.modes import BACKWARD, FORWARD, KeystrokeObserver, PromptEngine

from conftest import BACKSPACE, ENTER, ESC, LEFT, RIGHT, ctrl


class ScriptedHost:
    def __init__(self, keys: Iterable[KeyStroke]) -> None:
        self.keys = deque(keys)
        self.messages: List[str] = []
        self.refreshes = 0

    def set_message(self, text: str) -> None:
        self.messages.append(text)

    def refresh_screen(self) -> None:
        self.refreshes += 1

    def read_key(self) -> KeyStroke:
        return self.keys.popleft()


class RecordingObserver(KeystrokeObserver):
    def __init__(self) -> None:
        self.calls: List[Tuple[str, str]] = []

    def on_keystroke(self, query: str, key: KeyStroke) -> None:
        self.calls.append((query, key.token))


def strokes(data: bytes) -> List[KeyStroke]:
    return [byte_to_stroke(byte) for byte in data]


def test_prompt_returns_typed_text_on_enter() -> None:
    host = ScriptedHost(strokes(b"abc\r"))

    result = PromptEngine(host).run("Name: %s")

    assert result == "abc"
    assert host.messages[-2] == "Name: abc"
    assert host.messages[-1] == ""


def test_prompt_ignores_enter_on_empty_buffer() -> None:
    host = ScriptedHost(strokes(b"\rx\r"))

    assert PromptEngine(host).run("%s") == "x"


def test_prompt_backspace_trims_and_tolerates_empty() -> None:
    keys = strokes(b"\x7fab\x7f\x08c") + [KeyStroke(key=models.DELETE)] + strokes(b"d\r")
    host = ScriptedHost(keys)

    assert PromptEngine(host).run("%s") == "d"


def test_prompt_escape_cancels() -> None:
    host = ScriptedHost(strokes(b"abc\x1b"))

    assert PromptEngine(host).run("%s") is None
    assert host.messages[-1] == ""


def test_prompt_skips_control_and_tab_bytes() -> None:
    host = ScriptedHost(strokes(b"a\tb\x01c\r"))

    assert PromptEngine(host).run("%s") == "abc"


def test_observer_sees_every_keystroke_including_confirm() -> None:
    host = ScriptedHost(strokes(b"ab\x7f\r"))
    observer = RecordingObserver()

    PromptEngine(host).run("%s", observer)

    assert observer.calls == [
        ("a", "a"),
        ("ab", "b"),
        ("a", "BACKSPACE"),
        ("a", "ENTER"),
    ]


def test_observer_sees_cancel_with_final_buffer() -> None:
    host = ScriptedHost(strokes(b"q\x1b"))
    observer = RecordingObserver()

    PromptEngine(host).run("%s", observer)

    assert observer.calls[-1] == ("q", "ESC")


def test_search_moves_to_first_match(make_editor) -> None:
    editor, terminal = make_editor(["abc", "def", "xyz"])
    terminal.feed(b"ef", ENTER)

    result = find(editor)

    assert result.status == "search"
    assert result.message == "ef"
    assert editor.cursor.position == (1, 1)


def test_search_next_wraps_back_to_only_match(make_editor) -> None:
    editor, terminal = make_editor(["abc", "def", "xyz"])
    terminal.feed(b"ef", RIGHT, RIGHT, LEFT, ENTER)

    find(editor)

    assert editor.cursor.position == (1, 1)


def test_search_cycles_forward_and_backward(make_editor) -> None:
    editor, terminal = make_editor(["cat", "dog", "catalog", "bird", "concat"])
    positions = []
    terminal.feed(b"cat")
    terminal.feed(RIGHT, RIGHT, RIGHT, LEFT, ENTER)

    original_refresh = editor.refresh_screen

    def capture() -> None:
        positions.append(editor.cursor.position)
        original_refresh()

    editor.refresh_screen = capture  # type: ignore[method-assign]
    find(editor)

    # The prompt repaints before reading each key.
    assert positions[3] == (0, 0)
    assert positions[4] == (2, 0)
    assert positions[5] == (4, 3)
    assert positions[6] == (0, 0)
    assert positions[7] == (4, 3)
    assert editor.cursor.position == (4, 3)


def test_search_match_after_tab_uses_edit_offset(make_editor) -> None:
    editor, terminal = make_editor(["plain", "\tneedle"])
    terminal.feed(b"needle", ENTER)

    find(editor)

    assert editor.cursor.position == (1, 1)


def test_search_cancel_restores_cursor_and_viewport(make_editor) -> None:
    lines = [f"row {i}" for i in range(40)]
    lines[30] = "target"
    editor, terminal = make_editor(lines, size=(12, 40))
    editor.cursor.move_to(2, 3)
    editor.viewport.restore((1, 0))
    terminal.feed(b"target", ESC)

    result = find(editor)

    assert result.status == "search_cancelled"
    assert editor.cursor.position == (2, 3)
    assert editor.viewport.snapshot() == (1, 0)


def test_search_hit_scrolls_match_to_top(make_editor) -> None:
    lines = [f"row {i}" for i in range(40)]
    lines[30] = "target"
    editor, terminal = make_editor(lines, size=(12, 40))
    terminal.feed(b"target", ENTER)

    find(editor)
    editor.refresh_screen()

    assert editor.cursor.row == 30
    assert editor.viewport.row_offset == 30


def test_search_without_match_leaves_cursor(make_editor) -> None:
    editor, terminal = make_editor(["abc", "def"])
    editor.cursor.move_to(1, 2)
    terminal.feed(b"zzz", ENTER)

    find(editor)

    assert editor.cursor.position == (1, 2)


def test_search_state_resets_when_session_ends(make_editor) -> None:
    from lexi.modes import SearchObserver

    editor, _ = make_editor(["abc"])
    observer = SearchObserver(editor.document, editor.cursor, editor.viewport)
    observer.last_match = 0
    observer.direction = BACKWARD

    observer.on_keystroke("abc", byte_to_stroke(0x0D))

    assert observer.last_match == -1
    assert observer.direction == FORWARD


def test_find_is_bound_to_ctrl_f(make_editor) -> None:
    editor, terminal = make_editor(["abc", "def"])
    terminal.feed(ctrl("f"), b"de", ENTER)

    editor.process_keypress()

    assert editor.cursor.position == (1, 0)


def test_backspace_in_search_rescans_from_top(make_editor) -> None:
    editor, terminal = make_editor(["ab", "abc"])
    terminal.feed(b"abc", BACKSPACE, ENTER)

    find(editor)

    assert editor.cursor.position == (0, 0)
