"""Cursor motion and scroll tracking for the visible window."""

from enum import Enum

from .document import Document, Position


class Direction(Enum):
    """Cursor navigation commands."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    HOME = "home"
    END = "end"


class Viewport:
    """Cursor position and scroll offset over a document.

    ``width`` and ``height`` are the size of the text area in terminal
    cells. All positions are in grapheme columns and document rows.
    """

    def __init__(self, width: int = 80, height: int = 22):
        self.cursor = Position()
        self.offset = Position()
        self.width = width
        self.height = height

    def resize(self, width: int, height: int):
        self.width = max(width, 0)
        self.height = max(height, 0)

    def jump_to(self, position: Position):
        self.cursor = Position(position.x, position.y)

    def snapshot(self) -> tuple[Position, Position]:
        return (Position(self.cursor.x, self.cursor.y), Position(self.offset.x, self.offset.y))

    def restore(self, snapshot: tuple[Position, Position]):
        cursor, offset = snapshot
        self.cursor = Position(cursor.x, cursor.y)
        self.offset = Position(offset.x, offset.y)

    def move(self, direction: Direction, document: Document) -> Position:
        """Move the cursor one step in ``direction`` and return its new position.

        The cursor may sit on the row just past the last line. After every
        move x is clamped to the length of the row under the cursor, so
        moving onto a shorter line pulls the cursor back to its end.
        """
        x, y = self.cursor.x, self.cursor.y
        row_count = len(document)
        row_length = document.row_length(y)

        if direction is Direction.UP:
            y = max(0, y - 1)
        elif direction is Direction.DOWN:
            y = min(row_count, y + 1)
        elif direction is Direction.LEFT:
            if x > 0:
                x -= 1
            elif y > 0:
                y -= 1
                x = document.row_length(y)
        elif direction is Direction.RIGHT:
            if x < row_length:
                x += 1
            elif y < row_count:
                y += 1
                x = 0
        elif direction is Direction.PAGE_UP:
            y = max(0, y - self.height)
        elif direction is Direction.PAGE_DOWN:
            y = min(row_count, y + self.height)
        elif direction is Direction.HOME:
            x = 0
        elif direction is Direction.END:
            x = row_length

        x = min(x, document.row_length(y))
        self.cursor = Position(x, y)
        return self.cursor

    def scroll(self) -> Position:
        """Bring the offset toward the cursor.

        Moving above or left of the window snaps the offset to the cursor.
        Moving below or right of it advances the offset by a single
        row/column per call, which gives line-by-line scrolling.
        """
        x, y = self.cursor.x, self.cursor.y

        if y < self.offset.y:
            self.offset.y = y
        elif self.height and y >= self.offset.y + self.height:
            self.offset.y += 1

        if x < self.offset.x:
            self.offset.x = x
        elif self.width and x >= self.offset.x + self.width:
            self.offset.x += 1

        return self.offset

    def screen_cursor(self) -> Position:
        """Cursor position relative to the window, kept inside it."""
        x = max(0, self.cursor.x - self.offset.x)
        y = max(0, self.cursor.y - self.offset.y)
        if self.width:
            x = min(x, self.width - 1)
        if self.height:
            y = min(y, self.height - 1)
        return Position(x, y)
