"""Test keyboard input handling."""

import pytest
from linepad.keyboard import KeyboardHandler, KeyType, RawKeyEvent, RawTextEvent


class MockTerminal:
    """Mock terminal interface for testing."""

    def __init__(self):
        self._key_queue = []

    def get_key(self, timeout=None):
        """Mock get_key that returns from queue."""
        if self._key_queue:
            return self._key_queue.pop(0)
        return None

    def add_key(self, key_str):
        self._key_queue.append(key_str)


@pytest.fixture
def handler():
    return KeyboardHandler(MockTerminal())


@pytest.mark.parametrize("token, value", [
    ('<LEFT>', 'left'),
    ('<RIGHT>', 'right'),
    ('<UP>', 'up'),
    ('<DOWN>', 'down'),
    ('<BACKSPACE>', 'backspace'),
    ('<DELETE>', 'delete'),
    ('<PAGEUP>', 'page_up'),
    ('<PAGEDOWN>', 'page_down'),
    ('<HOME>', 'home'),
    ('<END>', 'end'),
])
def test_named_special_keys(handler, token, value):
    event = handler.parse_key(token)
    assert event == RawKeyEvent(KeyType.SPECIAL, value, token, is_sequence=True)


@pytest.mark.parametrize("token", ['<Ctrl-j>', '<Ctrl-m>', '\r', '\n'])
def test_enter_variants(handler, token):
    event = handler.parse_key(token)
    assert event.key_type == KeyType.SPECIAL
    assert event.value == 'enter'


@pytest.mark.parametrize("token", ['\x7f', '\x08'])
def test_raw_backspace(handler, token):
    event = handler.parse_key(token)
    assert event.key_type == KeyType.SPECIAL
    assert event.value == 'backspace'


def test_ctrl_letter_token(handler):
    event = handler.parse_key('<Ctrl-s>')
    assert event.key_type == KeyType.CTRL
    assert event.value == 's'
    assert event.is_ctrl


def test_raw_ctrl_character(handler):
    event = handler.parse_key('\x11')  # Ctrl-Q
    assert event == RawKeyEvent(KeyType.CTRL, 'q', '\x11', is_ctrl=True)


@pytest.mark.parametrize("token, value", [
    ('<Esc+b>', 'b'),
    ('<Meta-f>', 'f'),
    ('<Alt-LEFT>', 'left'),
])
def test_alt_keys(handler, token, value):
    event = handler.parse_key(token)
    assert event.key_type == KeyType.ALT
    assert event.value == value
    assert event.is_alt


def test_shift_arrow(handler):
    event = handler.parse_key('<Shift-RIGHT>')
    assert event.key_type == KeyType.SHIFT_SPECIAL
    assert event.value == 'right'


@pytest.mark.parametrize("token", ['\x1b', '<ESC>'])
def test_escape(handler, token):
    event = handler.parse_key(token)
    assert event.key_type == KeyType.SPECIAL
    assert event.value == 'escape'


@pytest.mark.parametrize("token, char", [
    ('a', 'a'),
    ('Z', 'Z'),
    ('<', '<'),
    ('>', '>'),
    ('é', 'é'),
    ('<SPACE>', ' '),
    (' ', ' '),
    ('<TAB>', '\t'),
    ('\t', '\t'),
])
def test_text_events(handler, token, char):
    event = handler.parse_key(token)
    assert isinstance(event, RawTextEvent)
    assert event.character == char


def test_unknown_token_is_special(handler):
    event = handler.parse_key('<F5>')
    assert event.key_type == KeyType.SPECIAL
    assert event.value == 'f5'


def test_get_event_returns_none_without_input(handler):
    assert handler.get_event(timeout=0) is None


def test_drain_events_in_order():
    terminal = MockTerminal()
    handler = KeyboardHandler(terminal)
    for token in ['h', 'i', '<LEFT>', '<BACKSPACE>']:
        terminal.add_key(token)
    events = handler.drain_events()
    assert [type(e) for e in events] == [RawTextEvent, RawTextEvent, RawKeyEvent, RawKeyEvent]
    assert [getattr(e, 'character', None) or e.value for e in events] == ['h', 'i', 'left', 'backspace']
    assert handler.drain_events() == []
