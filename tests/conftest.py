"""Shared test doubles."""

import pytest
from wcwidth import wcswidth

from editr.editor import Editor
from editr.errors import TerminalError


class MockTerminal:
    """Stand-in for TerminalInterface that records output.

    Keys are fed from a queue; reading past the end raises TerminalError
    so a runaway loop fails instead of hanging.
    """

    def __init__(self, width=40, height=10):
        self.width = width
        self.height = height
        self.output = []
        self.entered = False
        self.exited = False
        self._keys = []

    def __enter__(self):
        self.entered = True
        return self

    def __exit__(self, exc_type, exc, tb):
        self.exited = True
        return False

    def feed(self, *keys):
        self._keys.extend(keys)

    def get_key(self, timeout=None):
        if not self._keys:
            raise TerminalError("no more input")
        return self._keys.pop(0)

    def size(self):
        return self.width, self.height

    def display_width(self, text):
        return wcswidth(text)

    def write(self, text):
        self.output.append(text)

    def flush(self):
        pass

    def move_cursor(self, x, y):
        self.output.append(f"[MOVE:{x},{y}]")

    def hide_cursor(self):
        self.output.append("[HIDE]")

    def show_cursor(self):
        self.output.append("[SHOW]")

    def clear_screen(self):
        self.output.append("[CLEAR]")

    def clear_line(self):
        self.output.append("[EOL]")

    def reverse(self, text):
        return f"[REV]{text}[/REV]"

    def highlight_palette(self):
        return {}

    @property
    def color_reset(self):
        return ""

    def screen(self):
        return "".join(self.output)


@pytest.fixture
def terminal():
    return MockTerminal()


@pytest.fixture
def editor(terminal):
    return Editor(terminal=terminal)
