"""Main editor controller."""

import logging
import sys
from typing import Callable, Optional

from .commands import CommandRegistry, QuitCommand
from .constants import EditorConstants
from .document import Document, Position
from .errors import DocumentOpenError, DocumentSaveError, TerminalError
from .keyboard import KeyboardHandler, KeyEvent
from .line import split_graphemes
from .status import StatusMessage
from .terminal import TerminalInterface
from .version import get_version
from .viewport import Direction, Viewport

logger = logging.getLogger(__name__)

PromptCallback = Callable[["Editor", KeyEvent, str], None]


def incremental_search(editor: "Editor", key_event: KeyEvent, query: str):
    """Prompt hook that moves the cursor to the match for ``query``.

    Typing searches again from where the search started; Right/Down
    continue to the next match.
    """
    if key_event.is_special('right') or key_event.is_special('down'):
        position = editor.document.find(query)
    else:
        position = editor.document.find(query, after=editor.search_origin)
    editor.search_match = position
    if position is not None:
        editor.viewport.jump_to(position)
        editor.viewport.scroll()


class Editor:
    """Main text editor application controller."""

    def __init__(self, terminal: Optional[TerminalInterface] = None,
                 document: Optional[Document] = None):
        """Initialize the editor components."""
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.document = document if document is not None else Document()
        self.viewport = Viewport()
        self._update_viewport_size()
        self.command_registry = CommandRegistry()
        self.status_message = StatusMessage(EditorConstants.HELP_MESSAGE)
        self.quit_times = EditorConstants.QUIT_TIMES
        self.should_quit = False
        # Incremental search state
        self.search_origin = Position()
        self.search_match: Optional[Position] = None

    def _update_viewport_size(self):
        width, height = self.terminal.size()
        self.viewport.resize(width, height - EditorConstants.RESERVED_ROWS)

    def set_status(self, text: str):
        self.status_message = StatusMessage(text)

    def load_file(self, filename: str):
        """Load a file, falling back to an empty document if it can't be read.

        Args:
            filename: Path to file to load
        """
        try:
            self.document = Document.open(filename)
        except DocumentOpenError as e:
            logger.warning("Could not open %s: %s", filename, e.reason)
            self.document = Document()
            self.set_status(EditorConstants.OPEN_ERROR_MESSAGE.format(filename))
        self.viewport.restore((Position(), Position()))

    def run(self) -> int:
        """Run the main editor loop.

        Returns:
            Process exit status: 0 after a normal quit, 1 if the terminal failed.
        """
        try:
            with self.terminal:
                while True:
                    self.refresh_screen()
                    if self.should_quit:
                        break
                    self.process_keypress()
        except TerminalError as e:
            logger.error("Terminal failure: %s", e)
            print(f"editr: {e}", file=sys.stderr)
            return 1
        return 0

    def _read_key_event(self) -> KeyEvent:
        while True:
            key_event = self.keyboard.get_key_event()
            if key_event is not None:
                return key_event

    def process_keypress(self):
        self.handle_key_event(self._read_key_event())

    def handle_key_event(self, key_event: KeyEvent):
        """Dispatch a key event, then scroll and reset quit confirmation.

        Args:
            key_event: KeyEvent object with parsed key information
        """
        command = self.command_registry.execute(self, key_event)
        if isinstance(command, QuitCommand):
            return
        self.viewport.scroll()
        if self.quit_times < EditorConstants.QUIT_TIMES:
            self.quit_times = EditorConstants.QUIT_TIMES
            self.set_status("")

    # --- Commands ---

    def request_quit(self):
        """Quit, or count down the confirmation presses for a dirty document."""
        if self.quit_times > 0 and self.document.dirty:
            self.set_status(EditorConstants.QUIT_WARNING_MESSAGE.format(self.quit_times))
            self.quit_times -= 1
            return
        self.should_quit = True

    def insert_char(self, char: str):
        """Insert at the cursor, then step right over what was inserted."""
        cursor = self.viewport.cursor
        rows_before = len(self.document)
        length_before = self.document.row_length(cursor.y)
        self.document.insert(cursor, char)
        # A combining mark can join the previous grapheme without adding a column
        if (char == '\n' or len(self.document) > rows_before
                or self.document.row_length(cursor.y) > length_before):
            self.viewport.move(Direction.RIGHT, self.document)

    def backspace(self):
        """Move left and delete, joining lines at column 0."""
        cursor = self.viewport.cursor
        if cursor.x > 0 or cursor.y > 0:
            self.viewport.move(Direction.LEFT, self.document)
            self.document.delete(self.viewport.cursor)

    def show_help(self):
        self.set_status(EditorConstants.HELP_MESSAGE)

    def save(self):
        """Save the document, asking for a file name if it has none."""
        filename = self.document.filename
        if filename is None:
            filename = self.prompt(EditorConstants.SAVE_AS_PROMPT)
            if filename is None:
                self.set_status(EditorConstants.SAVE_ABORTED_MESSAGE)
                return
        try:
            self.document.save(filename)
        except DocumentSaveError as e:
            self.set_status(EditorConstants.SAVE_ERROR_MESSAGE.format(e.reason))
            return
        self.set_status(EditorConstants.SAVE_OK_MESSAGE)

    def search(self):
        """Incremental search; Escape puts the cursor back where it was."""
        saved_view = self.viewport.snapshot()
        self.search_origin = Position(self.viewport.cursor.x, self.viewport.cursor.y)
        self.search_match = None
        query = self.prompt(EditorConstants.SEARCH_PROMPT, incremental_search)
        if query is None:
            self.viewport.restore(saved_view)
        elif self.search_match is None:
            self.viewport.restore(saved_view)
            self.set_status(EditorConstants.NOT_FOUND_MESSAGE.format(query))

    def prompt(self, prompt: str, callback: Optional[PromptCallback] = None) -> Optional[str]:
        """Read a line of input in the message bar.

        The callback runs after every keystroke except Enter and Escape,
        with the editor, the key event and the text typed so far.

        Returns:
            The entered text, or None if it was empty or cancelled.
        """
        result = ""
        while True:
            self.set_status(f"{prompt}{result}")
            self.refresh_screen()
            key_event = self._read_key_event()
            if key_event.is_special('backspace'):
                result = "".join(split_graphemes(result)[:-1])
            elif key_event.is_special('enter'):
                break
            elif key_event.is_special('escape'):
                result = ""
                break
            elif key_event.is_printable() and key_event.value != '\t':
                result += key_event.value
            if callback is not None:
                callback(self, key_event, result)
        self.set_status("")
        return result or None

    # --- Rendering ---

    def refresh_screen(self):
        """Draw the current editor state to terminal."""
        terminal = self.terminal
        terminal.hide_cursor()
        terminal.move_cursor(0, 0)
        if self.should_quit:
            terminal.clear_screen()
        else:
            self._update_viewport_size()
            self.draw_rows()
            self.draw_status_bar()
            self.draw_message_bar()
            cursor = self.screen_cursor()
            terminal.move_cursor(cursor.x, cursor.y)
        terminal.show_cursor()
        terminal.flush()

    def screen_cursor(self) -> Position:
        """Terminal cell of the cursor, measured in display cells."""
        position = self.viewport.screen_cursor()
        line = self.document.row(self.viewport.cursor.y)
        if line is not None:
            prefix = line.render(self.viewport.offset.x, self.viewport.cursor.x, palette={})
            position.x = min(self.terminal.display_width(prefix), max(self.viewport.width - 1, 0))
        return position

    def compose_rows(self) -> list[str]:
        """Text of every content row in the viewport."""
        offset = self.viewport.offset
        width, height = self.viewport.width, self.viewport.height
        palette = self.terminal.highlight_palette()
        reset = self.terminal.color_reset
        rows = []
        for screen_row in range(height):
            line = self.document.row(screen_row + offset.y)
            if line is not None:
                # The slice is ``width`` graphemes, so expanded tabs can run past the edge
                rows.append(line.render(offset.x, offset.x + width, palette, reset))
            elif self.document.is_empty() and screen_row == height // 3:
                rows.append(self.welcome_message())
            else:
                rows.append(EditorConstants.EMPTY_ROW_MARKER)
        return rows

    def welcome_message(self) -> str:
        message = EditorConstants.WELCOME_MESSAGE.format(get_version())
        width = self.viewport.width
        padding = max(width - len(message), 0) // 2
        spaces = " " * max(padding - 1, 0)
        return f"{EditorConstants.EMPTY_ROW_MARKER}{spaces}{message}"[:width]

    def compose_status_bar(self) -> str:
        width = self.viewport.width
        name = (self.document.filename or EditorConstants.NO_NAME)[:EditorConstants.FILENAME_DISPLAY_LIMIT]
        modified = " (modified)" if self.document.dirty else ""
        status = f"{name} - {len(self.document)} lines{modified}"
        cursor = self.viewport.cursor
        line_indicator = f"Ln {cursor.y + 1}, Col {cursor.x + 1}"
        padding = width - len(status) - len(line_indicator)
        if padding > 0:
            status += " " * padding
        return (status + line_indicator)[:width]

    def compose_message_bar(self, now: Optional[float] = None) -> str:
        if self.status_message.is_visible(now):
            return self.status_message.text[:self.viewport.width]
        return ""

    def draw_rows(self):
        for y, row in enumerate(self.compose_rows()):
            self.terminal.move_cursor(0, y)
            self.terminal.clear_line()
            self.terminal.write(row)

    def draw_status_bar(self):
        self.terminal.move_cursor(0, self.viewport.height)
        self.terminal.write(self.terminal.reverse(self.compose_status_bar()))

    def draw_message_bar(self):
        self.terminal.move_cursor(0, self.viewport.height + 1)
        self.terminal.clear_line()
        self.terminal.write(self.compose_message_bar())
