"""Cursor state and its transitions over a line buffer."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .buffer import LineBuffer


@dataclass(frozen=True)
class CursorState:
    """Edit position plus the column vertical moves try to return to.

    Transitions never mutate; each returns a new state. ``preferred_col``
    follows every horizontal move and explicit reposition, and is left
    alone by ``move_up``/``move_down`` so that crossing a short line does
    not lose the column.
    """

    row: int = 0
    col: int = 0
    preferred_col: int = 0

    @classmethod
    def at(cls, row: int, col: int) -> CursorState:
        return cls(row, col, col)

    @property
    def position(self) -> tuple[int, int]:
        return (self.row, self.col)

    def set_position(self, row: int, col: int) -> CursorState:
        return CursorState.at(row, col)

    def move_left(self, buffer: LineBuffer) -> CursorState:
        if self.col > 0:
            return CursorState.at(self.row, self.col - 1)
        if self.row > 0:
            row = self.row - 1
            return CursorState.at(row, buffer.line_length(row))
        return self

    def move_right(self, buffer: LineBuffer) -> CursorState:
        if self.col < buffer.line_length(self.row):
            return CursorState.at(self.row, self.col + 1)
        if self.row < buffer.line_count - 1:
            return CursorState.at(self.row + 1, 0)
        return self

    def move_up(self, buffer: LineBuffer) -> CursorState:
        if self.row == 0:
            return self
        return self._vertical(buffer, self.row - 1)

    def move_down(self, buffer: LineBuffer) -> CursorState:
        if self.row >= buffer.line_count - 1:
            return self
        return self._vertical(buffer, self.row + 1)

    def _vertical(self, buffer: LineBuffer, row: int) -> CursorState:
        col = min(self.preferred_col, buffer.line_length(row))
        return replace(self, row=row, col=col)

    def clamp(self, buffer: LineBuffer) -> CursorState:
        """Pull the cursor back inside ``buffer`` after the document changed."""
        row = min(max(self.row, 0), buffer.line_count - 1)
        col = min(max(self.col, 0), buffer.line_length(row))
        if (row, col) == self.position:
            return self
        return CursorState.at(row, col)


def move_left(cursor: CursorState, buffer: LineBuffer) -> CursorState:
    return cursor.move_left(buffer)


def move_right(cursor: CursorState, buffer: LineBuffer) -> CursorState:
    return cursor.move_right(buffer)


def move_up(cursor: CursorState, buffer: LineBuffer) -> CursorState:
    return cursor.move_up(buffer)


def move_down(cursor: CursorState, buffer: LineBuffer) -> CursorState:
    return cursor.move_down(buffer)
