"""Keyboard input handling using curtsies-style tokens.

Key tokens are turned into raw input events: ``RawTextEvent`` for text
that should be inserted and ``RawKeyEvent`` for everything else. Raw
events carry no editing meaning; ``keymap.KeyCommandMapper`` assigns it.
"""

from typing import Optional, Union
from dataclasses import dataclass
from enum import Enum

from .constants import EditorConstants


class KeyType(Enum):
    """Types of key events."""
    ALT = "alt"
    CTRL = "ctrl"
    SPECIAL = "special"
    SHIFT_SPECIAL = "shift_special"  # Shift + arrow keys, etc.


@dataclass(frozen=True)
class RawKeyEvent:
    """A key press that is not text input (arrows, Backspace, Ctrl-S, ...)."""
    key_type: KeyType
    value: str  # The base key (e.g., 's', 'left', 'backspace')
    raw: str  # The token as delivered by the terminal
    is_alt: bool = False
    is_ctrl: bool = False
    is_shift: bool = False
    is_sequence: bool = False


@dataclass(frozen=True)
class RawTextEvent:
    """A single character of text input."""
    character: str
    raw: str = ""


RawInputEvent = Union[RawKeyEvent, RawTextEvent]


SPECIAL_KEYS = frozenset({
    'left', 'right', 'up', 'down', 'home', 'end', 'enter', 'backspace', 'delete',
    'page_up', 'page_down', 'insert',
})


class KeyboardHandler:
    """Reads key tokens from the terminal and parses them into raw events."""

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def get_event(self, timeout: Optional[float] = None) -> Optional[RawInputEvent]:
        """Get the next raw input event, or None if no key arrived in time."""
        key = self.terminal.get_key(timeout)
        if not key:
            return None
        return self.parse_key(key)

    def drain_events(self) -> list[RawInputEvent]:
        """Return every event already waiting, in arrival order."""
        events = []
        while True:
            event = self.get_event(timeout=EditorConstants.KEY_POLL_TIMEOUT)
            if event is None:
                return events
            events.append(event)

    def parse_key(self, key) -> RawInputEvent:
        """Parse a key token into a raw event.

        Args:
            key: curtsies key name such as ``'a'``, ``'<LEFT>'`` or
                ``'<Ctrl-s>'``, or a single raw character

        Returns:
            Parsed raw event
        """
        key_str = str(key)

        # Curtsies-style key names like '<LEFT>', '<Ctrl-x>', '<Alt-left>'
        if len(key_str) > 2 and key_str.startswith('<') and key_str.endswith('>'):
            return self._parse_named(key_str)

        # Single-byte ASCII control chars (Ctrl-<letter>)
        if len(key_str) == 1:
            o = ord(key_str)
            if o in (8, 127):
                return RawKeyEvent(KeyType.SPECIAL, 'backspace', key_str)
            if key_str == '\t':
                return RawTextEvent('\t', key_str)
            if 1 <= o <= 26:  # Ctrl-A .. Ctrl-Z (exclude ESC=27)
                ch = chr(ord('a') + o - 1)
                # Map Ctrl-J/Ctrl-M to enter, consistent with terminals
                if ch in ('j', 'm'):
                    return RawKeyEvent(KeyType.SPECIAL, 'enter', key_str)
                return RawKeyEvent(KeyType.CTRL, ch, key_str, is_ctrl=True)

        # Bare ESC
        if key_str == '\x1b':
            return RawKeyEvent(KeyType.SPECIAL, 'escape', key_str)

        if len(key_str) == 1 and key_str.isprintable():
            return RawTextEvent(key_str, key_str)

        # Unrecognized multi-character input
        return RawKeyEvent(KeyType.SPECIAL, key_str, key_str, is_sequence=True)

    def _parse_named(self, key_str: str) -> RawInputEvent:
        name = key_str[1:-1]
        # Support both '-' and '+' as modifier separators (e.g., '<Esc+u>')
        lower = name.lower().replace('+', '-')
        parts = lower.split('-') if '-' in lower else [lower]
        mods = set()
        base = parts[-1]
        if len(parts) > 1:
            mods = set(parts[:-1])
            # '<Ctrl-->' and similar leave an empty base
            if not base:
                base = '-'
        # Normalize meta/esc->alt
        if 'meta' in mods or 'esc' in mods:
            mods.add('alt')
        if base in ('pageup', 'page_up'):
            base = 'page_up'
        elif base in ('pagedown', 'page_down'):
            base = 'page_down'

        # Map named whitespace tokens to text
        if base in ('space', 'spacebar', 'spc') and not mods:
            return RawTextEvent(' ', key_str)
        if base == 'tab' and not mods:
            return RawTextEvent('\t', key_str)
        if 'ctrl' in mods and len(base) == 1:
            # Map Ctrl-J / Ctrl-M to enter
            if base in ('j', 'm'):
                return RawKeyEvent(KeyType.SPECIAL, 'enter', key_str, is_sequence=True)
            return RawKeyEvent(KeyType.CTRL, base, key_str, is_ctrl=True)
        if 'alt' in mods and (base in SPECIAL_KEYS or len(base) == 1):
            return RawKeyEvent(KeyType.ALT, base, key_str, is_alt=True)
        if 'shift' in mods and base in SPECIAL_KEYS:
            return RawKeyEvent(KeyType.SHIFT_SPECIAL, base, key_str, is_shift=True, is_sequence=True)
        if base in SPECIAL_KEYS:
            return RawKeyEvent(KeyType.SPECIAL, base, key_str, is_sequence=True)
        if base in ('esc', 'escape'):
            return RawKeyEvent(KeyType.SPECIAL, 'escape', '\x1b')
        # Fallback: treat unknown token as special
        return RawKeyEvent(KeyType.SPECIAL, base, key_str, is_sequence=True)
