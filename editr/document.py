"""Document model: an ordered list of Lines plus file and search state."""

import errno
import logging
import os
import stat
import tempfile
from dataclasses import dataclass
from typing import Iterable, Optional

from .constants import EditorConstants
from .errors import DocumentOpenError, DocumentSaveError
from .line import Line

logger = logging.getLogger(__name__)


def _target_mode(filename: str) -> int:
    """Permission bits a rewrite of ``filename`` should carry.

    An existing file keeps its mode; a new one gets 0666 less the umask.
    """
    try:
        return stat.S_IMODE(os.stat(filename).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


@dataclass
class Position:
    """A cell in grapheme columns (x) and rows (y).

    Used for the cursor and, with x/y meaning first visible column/row,
    for the scroll offset.
    """
    x: int = 0
    y: int = 0


class Document:
    lines: list[Line]
    filename: Optional[str]

    def __init__(self, lines: Optional[Iterable[str]] = None, filename: Optional[str] = None):
        self.lines = [Line(text) for text in (lines or [])]
        self.filename = filename
        self._dirty = False
        self._search_anchor = Position()

    @classmethod
    def open(cls, filename: str) -> "Document":
        """Load a document from disk.

        Raises:
            DocumentOpenError: The file is missing, unreadable or not UTF-8.
        """
        try:
            with open(filename, 'r', encoding='utf-8', newline='') as f:
                content = f.read()
        except FileNotFoundError:
            raise DocumentOpenError(filename, "file not found")
        except PermissionError:
            raise DocumentOpenError(filename, "permission denied")
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentOpenError(filename, str(e))

        lines = [line.removesuffix('\r') for line in content.split('\n')] if content else []
        logger.debug("Opened %s (%d lines)", filename, len(lines))
        return cls(lines, filename=filename)

    def save(self, filename: Optional[str] = None):
        """Write the document atomically and clear the dirty flag.

        Args:
            filename: Target path; defaults to the document's own filename.

        Raises:
            DocumentSaveError: Nothing could be written. The previous file
                contents, if any, are left untouched.
        """
        filename = filename or self.filename
        if not filename:
            raise DocumentSaveError(None, "no file name")

        dir_name = os.path.dirname(filename) or '.'
        temp_filename = None
        try:
            # Temp file lives in the target directory so the rename is atomic
            with tempfile.NamedTemporaryFile(mode='w', encoding='utf-8', newline='',
                                             dir=dir_name,
                                             prefix=EditorConstants.ATOMIC_SAVE_PREFIX,
                                             suffix=EditorConstants.ATOMIC_SAVE_SUFFIX,
                                             delete=False) as temp_file:
                temp_filename = temp_file.name
                temp_file.write(self.text())
                temp_file.flush()
                os.fsync(temp_file.fileno())
            os.chmod(temp_filename, _target_mode(filename))
            os.replace(temp_filename, filename)
        except OSError as e:
            if temp_filename and os.path.exists(temp_filename):
                os.remove(temp_filename)
            if isinstance(e, PermissionError):
                reason = "permission denied"
            elif e.errno == errno.ENOSPC:
                reason = "no space left on device"
            else:
                reason = e.strerror or str(e)
            logger.warning("Saving %s failed: %s", filename, reason)
            raise DocumentSaveError(filename, reason) from e

        self.filename = filename
        self._dirty = False
        logger.debug("Saved %s (%d lines)", filename, len(self.lines))

    def text(self) -> str:
        return '\n'.join(line.text for line in self.lines)

    def row(self, y: int) -> Optional[Line]:
        if 0 <= y < len(self.lines):
            return self.lines[y]
        return None

    def row_length(self, y: int) -> int:
        """Grapheme length of row ``y``; 0 for rows past the end."""
        line = self.row(y)
        return len(line) if line is not None else 0

    def __len__(self) -> int:
        return len(self.lines)

    def is_empty(self) -> bool:
        return not self.lines

    @property
    def dirty(self) -> bool:
        return self._dirty

    def insert(self, at: Position, char: str):
        """Insert a character at ``at``; a newline splits the row."""
        if at.y > len(self.lines):
            return
        self._dirty = True
        if char == '\n':
            self._insert_newline(at)
        elif at.y == len(self.lines):
            self.lines.append(Line(char))
        else:
            self.lines[at.y].insert(at.x, char)

    def _insert_newline(self, at: Position):
        if at.y == len(self.lines):
            self.lines.append(Line())
            return
        new_line = self.lines[at.y].split(at.x)
        self.lines.insert(at.y + 1, new_line)

    def delete(self, at: Position):
        """Delete the grapheme at ``at``, joining the next row at end of line."""
        if at.y >= len(self.lines):
            return
        self._dirty = True
        line = self.lines[at.y]
        if at.x == len(line) and at.y + 1 < len(self.lines):
            next_line = self.lines.pop(at.y + 1)
            line.append(next_line)
        else:
            line.delete(at.x)

    def reset_search(self, position: Position):
        """Start the next search at ``position``."""
        self._search_anchor = Position(position.x, position.y)

    @property
    def search_anchor(self) -> Position:
        return Position(self._search_anchor.x, self._search_anchor.y)

    def find(self, query: str, after: Optional[Position] = None) -> Optional[Position]:
        """Find the next occurrence of ``query``, wrapping around the end.

        The scan starts at the search anchor (or at ``after``, which also
        resets the anchor): the rest of the anchor row first, then every
        following row from column 0, then from the top of the document back
        round to the anchor row. A match moves the anchor one grapheme past
        it, so calling again finds the following occurrence.
        """
        if after is not None:
            self.reset_search(after)
        if not query or not self.lines:
            return None

        start = self._search_anchor
        if start.y >= len(self.lines):
            start = Position()
        total = len(self.lines)
        for step in range(total + 1):
            y = (start.y + step) % total
            x = start.x if step == 0 else 0
            match = self.lines[y].find(query, x)
            if match is not None:
                self._search_anchor = Position(match + 1, y)
                logger.debug("Found %r at row %d, column %d", query, y, match)
                return Position(match, y)
        return None
