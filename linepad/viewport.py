"""Visible window over the buffer."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .cursor import CursorState


@dataclass(frozen=True)
class Viewport:
    scroll_row: int = 0
    visible_rows: int = 1

    @property
    def last_row(self) -> int:
        """Buffer row shown on the bottom screen line (may be past the end)."""
        return self.scroll_row + self.visible_rows - 1

    def contains(self, row: int) -> bool:
        return self.scroll_row <= row <= self.last_row

    def resized(self, visible_rows: int) -> Viewport:
        return replace(self, visible_rows=max(1, visible_rows))


def max_scroll_row(line_count: int, visible_rows: int) -> int:
    return max(0, line_count - visible_rows)


def reconcile(cursor: CursorState, viewport: Viewport, line_count: int) -> Viewport:
    """Return a viewport that shows the cursor row and respects the scroll bounds.

    A cursor above the window scrolls it up to the cursor; a cursor below
    scrolls it down until the cursor is the bottom row. The result is then
    clamped to ``[0, max(0, line_count - visible_rows)]``.
    """
    visible_rows = max(1, viewport.visible_rows)
    scroll_row = viewport.scroll_row
    if cursor.row < scroll_row:
        scroll_row = cursor.row
    elif cursor.row >= scroll_row + visible_rows:
        scroll_row = cursor.row - visible_rows + 1
    scroll_row = min(max(scroll_row, 0), max_scroll_row(line_count, visible_rows))
    if scroll_row == viewport.scroll_row and visible_rows == viewport.visible_rows:
        return viewport
    return Viewport(scroll_row=scroll_row, visible_rows=visible_rows)
