"""Maps raw key events to editor commands."""

from typing import Callable, Dict, Optional, Tuple

from .commands import (
    DeleteBackward,
    DeleteForward,
    EditorCommand,
    InsertChar,
    InsertNewLine,
    MoveCursorDown,
    MoveCursorLeft,
    MoveCursorRight,
    MoveCursorUp,
    NewDocument,
    SaveDocument,
)
from .keyboard import KeyType, RawInputEvent, RawTextEvent

CommandFactory = Callable[[], EditorCommand]


class KeyCommandMapper:
    """Registry for mapping key combinations to commands.

    Text events always map to ``InsertChar``. Key events map through the
    registry; keys without a binding map to nothing.
    """

    def __init__(self):
        self._bindings: Dict[Tuple[KeyType, str], CommandFactory] = {}
        self._setup_default_bindings()

    def _setup_default_bindings(self):
        """Set up the default key bindings."""
        # Movement commands
        self.register((KeyType.SPECIAL, 'left'), MoveCursorLeft)
        self.register((KeyType.SPECIAL, 'right'), MoveCursorRight)
        self.register((KeyType.SPECIAL, 'up'), MoveCursorUp)
        self.register((KeyType.SPECIAL, 'down'), MoveCursorDown)

        # Editing commands
        self.register((KeyType.SPECIAL, 'backspace'), DeleteBackward)
        self.register((KeyType.SPECIAL, 'delete'), DeleteForward)
        self.register((KeyType.CTRL, 'd'), DeleteForward)
        self.register((KeyType.SPECIAL, 'enter'), InsertNewLine)

        # Document commands
        self.register((KeyType.CTRL, 's'), SaveDocument)
        self.register((KeyType.CTRL, 'n'), NewDocument)

    def register(self, key: Tuple[KeyType, str], factory: CommandFactory):
        """Bind a key combination to a command factory."""
        self._bindings[key] = factory

    def try_map(self, event: RawInputEvent) -> Optional[EditorCommand]:
        """Return the command for ``event``, or None if the key is unbound."""
        if isinstance(event, RawTextEvent):
            return InsertChar(event.character)
        factory = self._bindings.get((event.key_type, event.value))
        if factory is None:
            return None
        return factory()
