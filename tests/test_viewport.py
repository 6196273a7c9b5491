from __future__ import annotations

import itertools

import pytest

from lexi.actions import move_cursor
from lexi.buffer import Cursor, Document
from lexi.keymaps.models import DOWN, LEFT, RIGHT, UP
from lexi.view import Viewport


def make_document() -> Document:
    lines = [f"line {i:02d} " + "x" * (i * 3) for i in range(30)]
    lines[5] = "\t\tdeeply\tindented"
    return Document.from_lines(lines)


def test_scroll_down_moves_offset_minimally() -> None:
    document = make_document()
    viewport = Viewport(rows=5, cols=20)
    cursor = Cursor(row=7, col=0)

    viewport.scroll(document, cursor)

    assert viewport.row_offset == 3


def test_scroll_up_snaps_offset_to_cursor() -> None:
    document = make_document()
    viewport = Viewport(rows=5, cols=20, row_offset=10)
    cursor = Cursor(row=4, col=0)

    viewport.scroll(document, cursor)

    assert viewport.row_offset == 4


def test_horizontal_scroll_uses_render_column() -> None:
    document = make_document()
    viewport = Viewport(rows=5, cols=10)
    cursor = Cursor(row=5, col=2)

    viewport.scroll(document, cursor)

    assert cursor.render_col == 16
    assert viewport.col_offset == 7
    assert viewport.row_offset == 1
    assert viewport.screen_position(cursor) == (4, 9)


def test_offsets_are_unchanged_when_cursor_visible() -> None:
    document = make_document()
    viewport = Viewport(rows=5, cols=20, row_offset=2, col_offset=1)
    cursor = Cursor(row=4, col=3)

    viewport.scroll(document, cursor)

    assert viewport.snapshot() == (2, 1)


def test_synthetic_row_has_zero_render_column() -> None:
    document = make_document()
    viewport = Viewport(rows=5, cols=20)
    cursor = Cursor(row=document.line_count, col=0)

    viewport.scroll(document, cursor)

    assert cursor.render_col == 0
    assert viewport.row_offset == document.line_count - 4


@pytest.mark.parametrize(
    ("start_offsets", "direction"),
    list(itertools.product([(0, 0), (12, 0), (29, 40), (3, 9)], [UP, DOWN, LEFT, RIGHT])),
)
def test_cursor_is_visible_after_any_single_move(start_offsets, direction) -> None:
    document = make_document()
    for row in range(0, document.line_count + 1, 3):
        viewport = Viewport(rows=6, cols=12)
        viewport.restore(start_offsets)
        line = document.get_line(row)
        cursor = Cursor(row=row, col=len(line) // 2 if line else 0)

        move_cursor(document, cursor, direction)
        viewport.scroll(document, cursor)

        assert viewport.row_offset <= cursor.row < viewport.row_offset + viewport.rows
        assert (
            viewport.col_offset
            <= cursor.render_col
            < viewport.col_offset + viewport.cols
        )


def test_viewport_requires_positive_size() -> None:
    with pytest.raises(ValueError):
        Viewport(rows=0, cols=10)
