"""Editor controller: applies commands to the document, cursor and viewport."""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from .buffer import LineBuffer
from .commands import (
    DeleteBackward,
    DeleteForward,
    EditorCommand,
    InsertChar,
    InsertNewLine,
    LoadDocument,
    MoveCursorDown,
    MoveCursorLeft,
    MoveCursorRight,
    MoveCursorUp,
    NewDocument,
    SaveDocument,
)
from .cursor import CursorState, move_down, move_left, move_right, move_up
from .document import Document
from .errors import NoFilePathError
from .keyboard import RawInputEvent
from .keymap import KeyCommandMapper
from .viewport import Viewport, reconcile

logger = logging.getLogger(__name__)


class EditorController:
    """Central coordinator that owns editor state and applies commands.

    The controller is the only thing that mutates the document, the cursor
    and the viewport. Every command runs to completion and is followed by
    one viewport reconciliation.
    """

    def __init__(self, visible_rows: int = 1, mapper: Optional[KeyCommandMapper] = None):
        self.document = Document()
        self.cursor = CursorState()
        self.viewport = Viewport(visible_rows=max(1, visible_rows))
        self.mapper = mapper or KeyCommandMapper()
        self._handlers: Dict[type, Callable[[EditorCommand], None]] = {
            MoveCursorLeft: self._move(move_left),
            MoveCursorRight: self._move(move_right),
            MoveCursorUp: self._move(move_up),
            MoveCursorDown: self._move(move_down),
            InsertChar: self._insert_char,
            DeleteBackward: self._delete_backward,
            DeleteForward: self._delete_forward,
            InsertNewLine: self._insert_newline,
            SaveDocument: self._save,
            LoadDocument: self._load,
            NewDocument: self._new,
        }

    @property
    def buffer(self) -> LineBuffer:
        return self.document.buffer

    @property
    def handled_commands(self) -> frozenset:
        return frozenset(self._handlers)

    def handle_raw_input(self, event: RawInputEvent) -> bool:
        """Map a raw input event to a command and execute it.

        Returns:
            True if the document content changed
        """
        command = self.mapper.try_map(event)
        if command is None:
            return False
        return self.execute(command)

    def execute(self, command: EditorCommand) -> bool:
        """Apply ``command`` and reconcile the viewport.

        Document commands may raise ``EditorError`` subclasses; in that
        case the editor state is unchanged.

        Returns:
            True if the document content changed
        """
        handler = self._handlers[type(command)]
        handler(command)
        if command.edits_text:
            self.document.mark_dirty()
        self._reconcile()
        logger.debug("Command: %s | Cursor=(%d,%d)", type(command).__name__,
                     self.cursor.row, self.cursor.col)
        return command.edits_text

    def set_visible_rows(self, rows: int) -> None:
        """Resize the viewport; ``rows`` is clamped to at least one."""
        self.viewport = self.viewport.resized(rows)
        self._reconcile()

    def set_cursor(self, row: int, col: int) -> None:
        """Reposition the cursor, clamped into the buffer."""
        self.cursor = CursorState.at(row, col).clamp(self.buffer)
        self._reconcile()

    def visible_lines(self) -> list[str]:
        """Text of the rows inside the viewport."""
        start = self.viewport.scroll_row
        end = min(self.buffer.line_count, start + self.viewport.visible_rows)
        return [self.buffer.get_line(row) for row in range(start, end)]

    def cursor_screen_position(self) -> tuple[int, int]:
        """Cursor position relative to the top of the viewport."""
        return (self.cursor.row - self.viewport.scroll_row, self.cursor.col)

    def _reconcile(self) -> None:
        self.viewport = reconcile(self.cursor, self.viewport, self.buffer.line_count)

    # Handlers

    def _move(self, transition: Callable[[CursorState, LineBuffer], CursorState]):
        def handler(command: EditorCommand) -> None:
            self.cursor = transition(self.cursor, self.buffer)
        return handler

    def _insert_char(self, command: InsertChar) -> None:
        row, col = self.cursor.position
        self.buffer.insert_char(row, col, command.character)
        self.cursor = self.cursor.set_position(row, col + 1)

    def _delete_backward(self, command: DeleteBackward) -> None:
        row, col = self.cursor.position
        if col > 0:
            self.buffer.delete_char(row, col)
            self.cursor = self.cursor.set_position(row, col - 1)
        elif row > 0:
            new_col = self.buffer.line_length(row - 1)
            self.buffer.delete_char(row, col)
            self.cursor = self.cursor.set_position(row - 1, new_col)

    def _delete_forward(self, command: DeleteForward) -> None:
        row, col = self.cursor.position
        if col < self.buffer.line_length(row):
            self.buffer.delete_char(row, col + 1)
        elif row < self.buffer.line_count - 1:
            self.buffer.delete_char(row + 1, 0)

    def _insert_newline(self, command: InsertNewLine) -> None:
        row, col = self.cursor.position
        self.buffer.insert_newline(row, col)
        self.cursor = self.cursor.set_position(row + 1, 0)

    def _save(self, command: SaveDocument) -> None:
        path = command.path or self.document.file_path
        if not path:
            raise NoFilePathError("Document has no file name")
        self.buffer.save_to_file(path)
        self.document.set_path(path)

    def _load(self, command: LoadDocument) -> None:
        buffer = LineBuffer()
        buffer.load_from_file(command.path)
        self.document = Document(buffer, command.path)
        self.cursor = CursorState()
        self.viewport = Viewport(visible_rows=self.viewport.visible_rows)

    def _new(self, command: NewDocument) -> None:
        self.document = Document()
        self.cursor = CursorState()
        self.viewport = Viewport(visible_rows=self.viewport.visible_rows)
