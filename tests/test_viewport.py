"""Tests for viewport reconciliation."""

from linepad.cursor import CursorState
from linepad.viewport import Viewport, max_scroll_row, reconcile


def test_cursor_inside_window_keeps_scroll():
    viewport = Viewport(scroll_row=2, visible_rows=5)
    assert reconcile(CursorState.at(4, 0), viewport, 20) is viewport


def test_cursor_above_window_scrolls_up_to_cursor():
    viewport = reconcile(CursorState.at(3, 0), Viewport(scroll_row=10, visible_rows=5), 20)
    assert viewport.scroll_row == 3


def test_cursor_below_window_becomes_last_row():
    viewport = reconcile(CursorState.at(12, 0), Viewport(scroll_row=0, visible_rows=5), 20)
    assert viewport.scroll_row == 8
    assert viewport.last_row == 12


def test_scroll_clamped_to_document_end():
    """10 lines, 4 visible, scroll 8: scroll must come back to at most 6."""
    viewport = reconcile(CursorState.at(9, 0), Viewport(scroll_row=8, visible_rows=4), 10)
    assert viewport.scroll_row <= 6
    assert viewport.scroll_row == 6


def test_short_document_never_scrolls():
    viewport = reconcile(CursorState.at(2, 0), Viewport(scroll_row=5, visible_rows=10), 3)
    assert viewport.scroll_row == 0


def test_visible_rows_clamped_to_one():
    viewport = reconcile(CursorState.at(3, 0), Viewport(scroll_row=0, visible_rows=0), 10)
    assert viewport.visible_rows == 1
    assert viewport.scroll_row == 3


def test_resized_clamps_rows():
    assert Viewport(visible_rows=5).resized(-3).visible_rows == 1
    assert Viewport(visible_rows=5).resized(7).visible_rows == 7


def test_contains():
    viewport = Viewport(scroll_row=4, visible_rows=3)
    assert viewport.contains(4)
    assert viewport.contains(6)
    assert not viewport.contains(3)
    assert not viewport.contains(7)


def test_max_scroll_row():
    assert max_scroll_row(10, 4) == 6
    assert max_scroll_row(3, 4) == 0


def test_invariant_holds_for_all_positions():
    for line_count in range(1, 12):
        for visible_rows in range(1, 6):
            for scroll_row in range(0, 14):
                for row in range(line_count):
                    viewport = reconcile(CursorState.at(row, 0),
                                         Viewport(scroll_row, visible_rows), line_count)
                    assert 0 <= viewport.scroll_row <= max(0, line_count - visible_rows)
                    assert viewport.contains(row)
