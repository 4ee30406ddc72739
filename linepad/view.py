"""Read-only presentation of the controller state as terminal rows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .controller import EditorController


def display_text(line: str) -> str:
    """Text as drawn on screen, one cell per character."""
    return line.replace('\t', ' ')


@dataclass
class Frame:
    lines: list[str]
    cursor_y: int
    cursor_x: int


class TerminalView:
    """Turns the visible part of the buffer into fixed-width screen lines.

    Lines are not wrapped. When the cursor column falls outside the screen,
    the view scrolls horizontally; ``left_column`` is the first buffer
    column shown and persists between renders so the text does not jump
    on every keystroke.
    """

    def __init__(self, num_columns: int = 80):
        self.num_columns = num_columns
        self.left_column = 0

    def _update_left_column(self, col: int) -> None:
        width = max(1, self.num_columns)
        if col < self.left_column:
            self.left_column = col
        elif col >= self.left_column + width:
            self.left_column = col - width + 1

    def render(self, controller: EditorController) -> Frame:
        cursor_y, col = controller.cursor_screen_position()
        self._update_left_column(col)
        start = self.left_column
        end = start + self.num_columns
        lines = [display_text(line[start:end]) for line in controller.visible_lines()]
        return Frame(lines=lines, cursor_y=cursor_y, cursor_x=col - start)


def compose_status(controller: EditorController, width: int, message: str | None = None,
                   hint: str = "") -> str:
    """Status line: a message if there is one, otherwise file name, key hint and position.

    The hint is dropped first when the terminal is too narrow for everything.
    """
    if message:
        return message[:width].ljust(width)
    doc = controller.document
    name = doc.display_name + (" *" if doc.is_dirty else "")
    position = f"Ln {controller.cursor.row + 1}, Col {controller.cursor.col + 1} "
    left = f" {name}"
    if hint and len(left) + len(hint) + len(position) + 4 <= width:
        left = f"{left}  {hint}"
    gap = width - len(left) - len(position)
    if gap < 1:
        return (left + " " + position)[:width].ljust(width)
    return left + " " * gap + position
