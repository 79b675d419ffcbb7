"""A single line of text addressed by grapheme clusters.

All public positions are grapheme indices. Code point offsets into the
underlying string only show up inside this module.
"""

from typing import Mapping, Optional

import regex

from .constants import EditorConstants
from .highlighting import HighlightType, highlight_graphemes

_GRAPHEME_PATTERN = regex.compile(r"\X")

_r, _g, _b = EditorConstants.NUMBER_COLOR
DEFAULT_PALETTE: dict[HighlightType, str] = {
    HighlightType.NUMBER: f"\x1b[38;2;{_r};{_g};{_b}m",
}
DEFAULT_RESET = "\x1b[39m"


def split_graphemes(text: str) -> list[str]:
    """Split text into extended grapheme clusters."""
    return _GRAPHEME_PATTERN.findall(text)


class Line:
    """One line of a document.

    Keeps the raw text together with its grapheme segmentation and a
    parallel highlight sequence. Both caches are rebuilt inside every
    mutating call, so ``len(line)`` and ``line.highlighting`` always
    describe the current text.
    """

    def __init__(self, text: str = ""):
        self._text = text
        self._graphemes: list[str] = []
        self._length = 0
        self.highlighting: list[HighlightType] = []
        self._update()

    @property
    def text(self) -> str:
        return self._text

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Line({self._text!r})"

    def __eq__(self, other) -> bool:
        if isinstance(other, Line):
            return self._text == other._text
        return NotImplemented

    def __len__(self) -> int:
        return self._length

    def is_empty(self) -> bool:
        return self._length == 0

    def _set_text(self, text: str):
        self._text = text
        self._update()

    def _update(self):
        """Resegment the text and refresh the cached length and highlights."""
        self._graphemes = split_graphemes(self._text)
        self._length = len(self._graphemes)
        self.highlight()

    def highlight(self):
        """Recompute the highlight category of every grapheme."""
        self.highlighting = highlight_graphemes(self._graphemes)

    def render(self, start: int, end: int,
               palette: Optional[Mapping[HighlightType, str]] = None,
               reset: Optional[str] = None) -> str:
        """Return the displayable text for graphemes ``[start, end)``.

        The range is clamped to the line. Tabs expand to two spaces and
        highlighted graphemes are wrapped in ``palette[kind]`` and ``reset``.
        Pass an empty palette to render without color.
        """
        if palette is None:
            palette = DEFAULT_PALETTE
        if reset is None:
            reset = DEFAULT_RESET
        end = min(end, self._length)
        start = min(max(start, 0), end)

        out = []
        for grapheme, kind in zip(self._graphemes[start:end], self.highlighting[start:end]):
            if grapheme == "\t":
                out.append(EditorConstants.TAB_DISPLAY)
            elif kind in palette:
                out.append(f"{palette[kind]}{grapheme}{reset}")
            else:
                out.append(grapheme)
        return "".join(out)

    def insert(self, at: int, text: str):
        """Insert text before grapheme ``at``; append when past the end."""
        if at >= self._length:
            self._set_text(self._text + text)
        else:
            prefix = "".join(self._graphemes[:at])
            remainder = "".join(self._graphemes[at:])
            self._set_text(prefix + text + remainder)

    def delete(self, at: int):
        """Remove the grapheme at ``at``. No-op past the end."""
        if at >= self._length or at < 0:
            return
        self._set_text("".join(self._graphemes[:at] + self._graphemes[at + 1:]))

    def append(self, other: "Line"):
        self._set_text(self._text + other._text)

    def split(self, at: int) -> "Line":
        """Truncate this line to ``[0, at)`` and return the rest as a new Line."""
        remainder = "".join(self._graphemes[at:])
        self._set_text("".join(self._graphemes[:at]))
        return Line(remainder)

    def find(self, query: str, after: int = 0) -> Optional[int]:
        """Find ``query`` at or after grapheme ``after``.

        Returns the grapheme index of the match, or None. A match that
        starts inside a grapheme cluster maps to that cluster.
        """
        if not query or after >= self._length:
            return None
        after = max(after, 0)
        tail = self._graphemes[after:]
        offset = "".join(tail).find(query)
        if offset < 0:
            return None
        position = 0
        for index, grapheme in enumerate(tail):
            position += len(grapheme)
            if offset < position:
                return after + index
        return None
