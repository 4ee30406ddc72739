"""Editor commands.

A command is an immutable description of one editing intention,
independent of the key or device that produced it. The set is closed:
``ALL_COMMANDS`` lists every type, and the controller keeps one handler
per entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class EditorCommand:
    """Base class for editor commands."""

    __slots__ = ()

    #: True for commands that change document content.
    edits_text = False


class MovementCommand(EditorCommand):
    """Base class for cursor movement commands."""

    __slots__ = ()


class EditCommand(EditorCommand):
    """Base class for commands that modify the buffer."""

    __slots__ = ()
    edits_text = True


class DocumentCommand(EditorCommand):
    """Base class for whole-document commands (save, load, new)."""

    __slots__ = ()


@dataclass(frozen=True)
class MoveCursorLeft(MovementCommand):
    pass


@dataclass(frozen=True)
class MoveCursorRight(MovementCommand):
    pass


@dataclass(frozen=True)
class MoveCursorUp(MovementCommand):
    pass


@dataclass(frozen=True)
class MoveCursorDown(MovementCommand):
    pass


@dataclass(frozen=True)
class DeleteBackward(EditCommand):
    pass


@dataclass(frozen=True)
class DeleteForward(EditCommand):
    pass


@dataclass(frozen=True)
class InsertNewLine(EditCommand):
    pass


@dataclass(frozen=True)
class InsertChar(EditCommand):
    character: str

    def __post_init__(self):
        if len(self.character) != 1 or self.character in '\r\n':
            raise ValueError(f"InsertChar needs a single non-newline character, got {self.character!r}")


@dataclass(frozen=True)
class SaveDocument(DocumentCommand):
    """Save to ``path``, or to the document's own path when omitted."""
    path: Optional[str] = None


@dataclass(frozen=True)
class LoadDocument(DocumentCommand):
    path: str


@dataclass(frozen=True)
class NewDocument(DocumentCommand):
    pass


ALL_COMMANDS: tuple[type[EditorCommand], ...] = (
    MoveCursorLeft,
    MoveCursorRight,
    MoveCursorUp,
    MoveCursorDown,
    DeleteBackward,
    DeleteForward,
    InsertNewLine,
    InsertChar,
    SaveDocument,
    LoadDocument,
    NewDocument,
)
