"""Terminal interface using Blessed for display and Curtsies for input."""

import logging
import sys
import termios
from collections import deque
from typing import Optional

import blessed
from curtsies import Input
from curtsies.events import PasteEvent

from .constants import EditorConstants
from .errors import TerminalError
from .highlighting import HighlightType

logger = logging.getLogger(__name__)


class TerminalInterface:
    """Handles terminal I/O using Blessed.

    Use as a context manager: entering switches to the alternate screen
    and raw input, leaving restores the terminal on every exit path.
    """

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._curtsies_input: Optional[object] = None
        self._pending: deque[str] = deque()

    def __enter__(self) -> "TerminalInterface":
        self.setup()
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type is not None and self.is_fullscreen:
            # Leave a clean screen behind on the error path
            try:
                self.clear_screen()
                self.flush()
            except TerminalError:
                pass
        self.cleanup()
        return False

    def setup(self):
        """Enter fullscreen mode and raw keyboard input."""
        try:
            # Ctrl-S / Ctrl-Q must reach the editor instead of the tty driver
            self._curtsies_input = Input(keynames='curtsies', disable_terminal_start_stop=True)
            self._curtsies_input.__enter__()
        except (OSError, termios.error) as e:
            self._curtsies_input = None
            raise TerminalError(f"cannot read keyboard input: {e}") from e
        self.write(self.term.enter_fullscreen + self.term.clear)
        self.flush()
        self.is_fullscreen = True

    def cleanup(self):
        """Exit fullscreen mode and restore terminal."""
        if self.is_fullscreen:
            try:
                print(self.term.normal + self.term.exit_fullscreen + self.term.normal_cursor,
                      end='', flush=True)
            except OSError as e:
                logger.warning("Could not leave fullscreen mode: %s", e)
            self.is_fullscreen = False
        if self._curtsies_input is not None:
            try:
                self._curtsies_input.__exit__(None, None, None)
            except (OSError, termios.error) as e:
                # Teardown keeps going so the remaining state is still reset
                logger.warning("Could not restore terminal input mode: %s", e)
            finally:
                self._curtsies_input = None
        self._pending.clear()

    def get_key(self, timeout=None) -> Optional[str]:
        """Get a single key token from the user.

        Paste events are split into their individual keys.

        Args:
            timeout: Seconds to wait (None blocks until a key arrives)

        Returns:
            A curtsies key token, or None on timeout.

        Raises:
            TerminalError: Input is not available or the read failed.
        """
        if self._pending:
            return self._pending.popleft()
        if self._curtsies_input is None:
            raise TerminalError("keyboard input is not active")
        try:
            event = self._curtsies_input.send(timeout)
        except (OSError, termios.error, StopIteration) as e:
            raise TerminalError(f"cannot read from terminal: {e}") from e
        if event is None:
            return None

        if isinstance(event, PasteEvent):
            self._pending.extend(str(e) for e in event.events)
            return self._pending.popleft() if self._pending else None
        return str(event)

    def size(self) -> tuple[int, int]:
        """Terminal size as (width, height)."""
        return self.term.width, self.term.height

    def display_width(self, text: str) -> int:
        """Number of terminal cells ``text`` occupies."""
        return self.term.length(text)

    def write(self, text: str):
        try:
            print(text, end='')
        except OSError as e:
            raise TerminalError(f"cannot write to terminal: {e}") from e

    def flush(self):
        try:
            sys.stdout.flush()
        except OSError as e:
            raise TerminalError(f"cannot write to terminal: {e}") from e

    def move_cursor(self, x: int, y: int):
        self.write(self.term.move_xy(x, y))

    def hide_cursor(self):
        self.write(self.term.hide_cursor)

    def show_cursor(self):
        self.write(self.term.normal_cursor)

    def clear_screen(self):
        """Clear the entire screen."""
        self.write(self.term.home + self.term.clear)

    def clear_line(self):
        """Clear from the cursor to the end of the line."""
        self.write(self.term.clear_eol)

    def reverse(self, text: str) -> str:
        """Return text wrapped in reverse video."""
        return self.term.reverse + text + self.term.normal

    def highlight_palette(self) -> dict[HighlightType, str]:
        """Foreground sequences for each highlight category."""
        return {HighlightType.NUMBER: self.term.color_rgb(*EditorConstants.NUMBER_COLOR)}

    @property
    def color_reset(self) -> str:
        return self.term.normal
