"""Test keyboard input handling."""

import pytest
from editr.keyboard import KeyboardHandler, KeyEvent, KeyType


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


@pytest.mark.parametrize("token,value", [
    ('<UP>', 'up'),
    ('<DOWN>', 'down'),
    ('<LEFT>', 'left'),
    ('<RIGHT>', 'right'),
    ('<PAGEUP>', 'page_up'),
    ('<PAGEDOWN>', 'page_down'),
    ('<HOME>', 'home'),
    ('<END>', 'end'),
    ('<BACKSPACE>', 'backspace'),
    ('<DELETE>', 'delete'),
    ('<Shift-LEFT>', 'left'),
])
def test_special_keys(handler, token, value):
    event = handler.parse_key(token)
    assert event.key_type == KeyType.SPECIAL
    assert event.value == value


@pytest.mark.parametrize("token", ['<Ctrl-j>', '<Ctrl-m>', '\n', '\r'])
def test_enter_variants(handler, token):
    assert handler.parse_key(token).is_special('enter')


@pytest.mark.parametrize("token", ['<Ctrl-q>', '\x11'])
def test_ctrl_q(handler, token):
    event = handler.parse_key(token)
    assert event.key_type == KeyType.CTRL
    assert event.value == 'q'


def test_escape(handler):
    assert handler.parse_key('<ESC>').is_special('escape')
    assert handler.parse_key('\x1b').is_special('escape')


def test_alt_keys(handler):
    event = handler.parse_key('<Esc+x>')
    assert event.key_type == KeyType.ALT
    assert event.value == 'x'


def test_space_and_tab_are_regular(handler):
    space = handler.parse_key('<SPACE>')
    assert space.key_type == KeyType.REGULAR and space.value == ' '
    tab = handler.parse_key('<TAB>')
    assert tab.key_type == KeyType.REGULAR and tab.value == '\t'
    assert tab.is_printable()


def test_del_byte_is_backspace(handler):
    assert handler.parse_key('\x7f').is_special('backspace')


def test_regular_characters(handler):
    for ch in ['a', 'Z', '7', 'é', '<', '>']:
        event = handler.parse_key(ch)
        assert event.key_type == KeyType.REGULAR
        assert event.value == ch
        assert event.is_printable()


def test_control_key_is_not_printable():
    event = KeyEvent(key_type=KeyType.CTRL, value='s')
    assert not event.is_printable()


def test_get_key_event_reads_from_terminal():
    terminal = MockTerminal()
    handler = KeyboardHandler(terminal)
    terminal.add_key('<LEFT>')
    event = handler.get_key_event()
    assert event.is_special('left')
    assert handler.get_key_event() is None
