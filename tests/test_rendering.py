"""Tests for the screen layout: content rows, status bar and message bar."""

from editr.document import Document, Position
from editr.editor import Editor
from editr.status import StatusMessage
from editr.version import get_version

from conftest import MockTerminal


def test_empty_document_shows_welcome_banner(editor):
    rows = editor.compose_rows()
    assert len(rows) == 8
    banner = rows[8 // 3]
    assert banner.startswith("~")
    assert f"Editr -- version {get_version()}" in banner
    assert len(banner) <= 40
    assert all(row == "~" for i, row in enumerate(rows) if i != 8 // 3)


def test_rows_past_end_show_tilde(editor):
    editor.document = Document(["first", "second"])
    rows = editor.compose_rows()
    assert rows[:2] == ["first", "second"]
    assert rows[2:] == ["~"] * 6


def test_rows_follow_scroll_offset(editor):
    editor.document = Document([f"Line {i}" for i in range(20)])
    editor.viewport.offset = Position(2, 5)
    rows = editor.compose_rows()
    assert rows[0] == "ne 5"
    assert rows[7] == "ne 12"


def test_rows_are_limited_to_viewport_width():
    terminal = MockTerminal(width=5, height=4)
    editor = Editor(terminal=terminal, document=Document(["abcdefghij"]))
    assert editor.compose_rows()[0] == "abcde"


def test_status_bar_layout(editor):
    editor.document = Document(["a", "b", "c"], filename="notes.txt")
    editor.viewport.cursor = Position(1, 2)
    bar = editor.compose_status_bar()
    assert len(bar) == 40
    assert bar.startswith("notes.txt - 3 lines")
    assert bar.endswith("Ln 3, Col 2")


def test_status_bar_marks_modified_and_unnamed(editor):
    editor.document = Document(["a"])
    editor.document.insert(Position(0, 0), "x")
    assert editor.compose_status_bar().startswith("[No Name] - 1 lines (modified)")


def test_status_bar_truncates_long_names_and_narrow_terminals():
    terminal = MockTerminal(width=12, height=5)
    editor = Editor(terminal=terminal, document=Document([], filename="a" * 30))
    bar = editor.compose_status_bar()
    assert bar == "a" * 12


def test_message_bar_truncated_to_width():
    terminal = MockTerminal(width=10, height=5)
    editor = Editor(terminal=terminal)
    editor.status_message = StatusMessage("0123456789abcdef", time=0.0)
    assert editor.compose_message_bar(now=1.0) == "0123456789"


def test_refresh_draws_status_bar_in_reverse(editor, terminal):
    editor.refresh_screen()
    screen = terminal.screen()
    assert "[REV][No Name] - 0 lines" in screen
    assert "Ln 1, Col 1[/REV]" in screen
    assert screen.startswith("[HIDE]")
    assert screen.endswith("[SHOW]")


def test_refresh_positions_cursor_relative_to_offset(editor, terminal):
    editor.document = Document([f"Line {i}" for i in range(20)])
    editor.viewport.cursor = Position(3, 10)
    editor.viewport.offset = Position(1, 6)
    editor.refresh_screen()
    assert terminal.output[-2] == "[MOVE:2,4]"


def test_cursor_column_counts_expanded_tabs(editor):
    editor.document = Document(["\tx"])
    editor.viewport.cursor = Position(1, 0)
    assert editor.screen_cursor() == Position(2, 0)


def test_cursor_column_after_combining_mark(editor):
    editor.document = Document(["e\u0301x"])
    editor.viewport.cursor = Position(1, 0)
    assert editor.screen_cursor() == Position(1, 0)


def test_cursor_column_after_wide_character(editor):
    editor.document = Document(["\u4e2dx"])
    editor.viewport.cursor = Position(1, 0)
    assert editor.screen_cursor() == Position(2, 0)


def test_refresh_after_quit_clears_screen(editor, terminal):
    editor.should_quit = True
    editor.refresh_screen()
    assert "[CLEAR]" in terminal.screen()
    assert "[REV]" not in terminal.screen()


def test_refresh_picks_up_terminal_resize(editor, terminal):
    terminal.width, terminal.height = 20, 6
    editor.refresh_screen()
    assert (editor.viewport.width, editor.viewport.height) == (20, 4)
